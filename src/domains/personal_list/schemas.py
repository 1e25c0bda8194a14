from pydantic import BaseModel, ConfigDict, Field, constr


class CreateListRequest(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=100) = Field(
        ..., alias="nombre_lista", examples=["주말 요리"]
    )
    description: str | None = Field(None, alias="descripcion")

    model_config = ConfigDict(populate_by_name=True)


class ListResponse(BaseModel):
    id: int
    name: str
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)
