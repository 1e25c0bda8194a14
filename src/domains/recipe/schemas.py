from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from core.schemas import BaseResponse
from domains.recipe.models import Difficulty


# --- Request ---
class StepRequest(BaseModel):
    # 번호는 클라이언트가 보낸 값을 그대로 저장
    step_number: int = Field(..., alias="numero")
    description: str = Field(..., alias="descripcion")
    duration: int | None = Field(None, alias="duracion")
    image_url: str | None = Field(None, alias="imagen_url")

    model_config = ConfigDict(populate_by_name=True)


class IngredientRequest(BaseModel):
    name: str = Field(..., min_length=1, alias="nombre")
    unit_id: int | None = Field(None, alias="id_unidad")
    quantity: float | None = Field(None, alias="cantidad")
    notes: str | None = Field(None, alias="notas")

    model_config = ConfigDict(populate_by_name=True)


class RecipeRequest(BaseModel):
    """생성/수정 공용. 필수 항목 검사는 서비스에서 수행"""

    title: str | None = Field(None, alias="titulo")
    description: str | None = Field(None, alias="descripcion")
    servings: int | None = Field(None, alias="porciones")
    difficulty: Difficulty | None = Field(None, alias="dificultad")
    prep_time: int | None = Field(None, alias="tiempo_preparacion")
    steps: list[StepRequest] = Field(default_factory=list, alias="pasos")
    ingredients: list[IngredientRequest] = Field(default_factory=list, alias="ingredientes")
    categories: list[int] = Field(default_factory=list, alias="categorias")

    model_config = ConfigDict(populate_by_name=True)


class StatusUpdateRequest(BaseModel):
    new_status: str = Field(..., alias="nuevo_estado", examples=["Publicada"])
    reviewer_notes: str | None = Field(None, alias="notas_revisor")

    model_config = ConfigDict(populate_by_name=True)


# --- Response ---
class RecipeSummary(BaseModel):
    id: int
    title: str
    difficulty: str
    servings: int
    prep_time: int | None = None
    like_count: int
    published_at: datetime | None = None
    author_name: str
    author_surname: str

    model_config = ConfigDict(from_attributes=True)


class Pagination(BaseModel):
    total: int
    total_pages: int
    page: int
    limit: int


class RecipeListResponse(BaseResponse):
    data: list[RecipeSummary]
    pagination: Pagination


class StepResponse(BaseModel):
    step_number: int
    description: str
    duration: int | None = None
    image_url: str | None = None

    model_config = ConfigDict(from_attributes=True)


class RecipeIngredientResponse(BaseModel):
    name: str
    unit: str | None = None
    quantity: float | None = None
    notes: str | None = None


class RecipeDetail(BaseModel):
    id: int
    title: str
    description: str | None = None
    servings: int
    difficulty: str
    prep_time: int | None = None
    status: str
    like_count: int
    save_count: int
    view_count: int
    created_at: datetime
    published_at: datetime | None = None
    steps: list[StepResponse] = []
    ingredients: list[RecipeIngredientResponse] = []
    categories: list[int] = []
