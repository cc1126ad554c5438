from fastapi import APIRouter, Depends

from app.api.v1.errors import to_http
from app.api.v1.schemas import IdentitySchema, LoginRequestSchema, RegisterRequestSchema, TokenResponseSchema
from app.application.exceptions import BookingError
from app.application.use_cases.login import LoginUseCase
from app.domain.entities.identity import Identity
from app.wiring.dependencies import get_current_identity, get_login_use_case

router = APIRouter()


@router.post("/register", response_model=TokenResponseSchema, status_code=201)
def register(
    req: RegisterRequestSchema,
    uc: LoginUseCase = Depends(get_login_use_case),
):
    try:
        result = uc.register(name=req.name, email=req.email, password=req.password, phone=req.phone)
    except BookingError as e:
        raise to_http(e)
    return TokenResponseSchema(token=result.token, user=IdentitySchema.from_entity(result.identity))


@router.post("/login", response_model=TokenResponseSchema)
def login(
    req: LoginRequestSchema,
    uc: LoginUseCase = Depends(get_login_use_case),
):
    try:
        result = uc.login(identifier=req.identifier, password=req.password)
    except BookingError as e:
        raise to_http(e)
    return TokenResponseSchema(token=result.token, user=IdentitySchema.from_entity(result.identity))


@router.get("/me", response_model=IdentitySchema)
def me(identity: Identity = Depends(get_current_identity)):
    return IdentitySchema.from_entity(identity)
