from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class BaseResponse(BaseModel):
    success: bool = True
    message: str | None = None


class DataResponse(BaseResponse, Generic[T]):
    data: T


class CreatedId(BaseModel):
    id: int = Field(..., examples=[1])


class ToggleResponse(BaseResponse):
    action: Literal["added", "removed"]
