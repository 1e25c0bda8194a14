from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from core.schemas import BaseResponse


class RateRequest(BaseModel):
    # 범위 검사는 서비스에서 (InvalidScoreException)
    score: StrictInt = Field(..., alias="puntuacion", examples=[5])

    model_config = ConfigDict(populate_by_name=True)


class RateResponse(BaseResponse):
    action: Literal["created", "updated"]
