from fastapi import APIRouter, Depends

from core.di import get_current_identity, get_user_service
from core.exception.exceptions import TokenExpiredException, UnauthorizedException
from core.identity import Identity
from core.schemas import DataResponse
from domains.user.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
    UserNotFoundException,
)
from domains.user.schemas import (
    InfoResponse,
    LogInRequest,
    LogInResponse,
    SignUpRequest,
    SignUpResponse,
)
from domains.user.service import UserService
from util.docs import create_error_response

router = APIRouter()


@router.post(
    "/register",
    status_code=201,
    summary="회원가입 API",
    response_model=SignUpResponse,
    responses=create_error_response(DuplicateEmailException),
)
async def user_sign_up(request: SignUpRequest, user_service: UserService = Depends(get_user_service)):
    user = await user_service.sign_up(request)
    return SignUpResponse(user_id=user.id)


@router.post(
    "/login",
    status_code=200,
    summary="로그인 API",
    response_model=LogInResponse,
    responses=create_error_response(InvalidCredentialsException),
)
async def user_log_in(request: LogInRequest, user_service: UserService = Depends(get_user_service)):
    return await user_service.log_in(request)


@router.get(
    "/me",
    status_code=200,
    summary="유저 정보 호출 API",
    response_model=DataResponse[InfoResponse],
    responses=create_error_response(
        UnauthorizedException,
        TokenExpiredException,
        UserNotFoundException,
    ),
)
async def user_info(
    identity: Identity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
):
    info = await user_service.get_user_info(identity)
    return DataResponse[InfoResponse](data=info)
