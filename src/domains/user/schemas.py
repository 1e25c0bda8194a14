import uuid

from pydantic import BaseModel, ConfigDict, EmailStr, Field, constr

from core.identity import Role
from core.schemas import BaseResponse


class SignUpRequest(BaseModel):
    name: constr(min_length=1, max_length=50) = Field(..., alias="nombre")
    surname: constr(min_length=1, max_length=50) = Field(..., alias="apellido")
    email: EmailStr
    password: constr(min_length=1, max_length=128)

    model_config = ConfigDict(populate_by_name=True)


class SignUpResponse(BaseResponse):
    message: str = Field(default="회원가입이 완료되었습니다.", examples=["회원가입이 완료되었습니다."])
    user_id: uuid.UUID


class LogInRequest(BaseModel):
    email: EmailStr
    password: constr(min_length=1, max_length=128)


class LogInResponse(BaseResponse):
    message: str = "로그인에 성공했습니다."
    token: str
    role: Role


class InfoResponse(BaseModel):
    id: uuid.UUID
    name: str
    surname: str
    email: str
    role: Role

    model_config = ConfigDict(from_attributes=True)
