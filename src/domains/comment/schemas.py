import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, constr


class PostCommentRequest(BaseModel):
    text: constr(strip_whitespace=True, min_length=1) = Field(..., alias="texto", examples=["맛있어요!"])
    parent_id: int | None = Field(None, alias="id_comentario_padre")

    model_config = ConfigDict(populate_by_name=True)


class ReportCommentRequest(BaseModel):
    reason: str | None = Field(None, alias="motivo", examples=["스팸"])

    model_config = ConfigDict(populate_by_name=True)


class CommentResponse(BaseModel):
    """트리 구성은 클라이언트가 parent_id 로 한다"""

    id: int
    parent_id: int | None = None
    text: str
    created_at: datetime
    user_id: uuid.UUID
    author_name: str
    author_surname: str

    model_config = ConfigDict(from_attributes=True)
