from functools import lru_cache
import logging

from fastapi import Depends, Header, HTTPException

from app.application.exceptions import InvalidCredentials
from app.application.ports.booking_store import BookingStorePort
from app.application.ports.catalog import CatalogPort
from app.application.ports.identity_store import IdentityStorePort
from app.application.use_cases.booking_ledger import BookingLedger
from app.application.use_cases.login import LoginUseCase
from app.application.use_cases.payments import PaymentStubUseCase
from app.core.config import DEV_SECRET_KEY, settings
from app.domain.entities.identity import Identity, Role
from app.infrastructure.auth.jwt_tokens import JwtTokenService
from app.infrastructure.catalog.catalog_store import StaticCatalogStore
from app.infrastructure.identity.memory_identity_store import MemoryIdentityStore
from app.infrastructure.store.json_store import JsonBookingStore
from app.infrastructure.store.memory_store import MemoryBookingStore


logger = logging.getLogger(__name__)


@lru_cache
def get_booking_store() -> BookingStorePort:
    if settings.STORE_PROVIDER.lower() == "json":
        logger.info("Using JsonBookingStore at %s", settings.DATA_DIR)
        return JsonBookingStore(data_dir=settings.DATA_DIR)
    return MemoryBookingStore()


@lru_cache
def get_catalog() -> CatalogPort:
    return StaticCatalogStore()


@lru_cache
def get_identity_store() -> IdentityStorePort:
    store = MemoryIdentityStore()
    if settings.ADMIN_PASSWORD:
        store.register(
            name=settings.ADMIN_NAME,
            email=settings.ADMIN_EMAIL,
            password=settings.ADMIN_PASSWORD,
            role=Role.admin,
        )
    else:
        logger.warning("ADMIN_PASSWORD not set; no admin account seeded")
    return store


@lru_cache
def get_booking_ledger() -> BookingLedger:
    return BookingLedger(store=get_booking_store(), catalog=get_catalog())


@lru_cache
def get_login_use_case() -> LoginUseCase:
    if settings.ENV.lower() not in {"dev", "local", "test"} and settings.AUTH_SECRET_KEY == DEV_SECRET_KEY:
        raise ValueError("AUTH_SECRET_KEY must be set outside dev/local")
    tokens = JwtTokenService(secret=settings.AUTH_SECRET_KEY, ttl_minutes=settings.AUTH_TOKEN_TTL_MINUTES)
    return LoginUseCase(identities=get_identity_store(), tokens=tokens)


def get_payment_use_case() -> PaymentStubUseCase:
    return PaymentStubUseCase(ledger=get_booking_ledger(), currency=settings.CURRENCY)


def get_current_identity(
    authorization: str | None = Header(None),
    uc: LoginUseCase = Depends(get_login_use_case),
) -> Identity:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(
            status_code=401,
            detail={"error": "unauthorized", "message": "Missing bearer token"},
        )
    try:
        return uc.resolve(authorization.split(" ", 1)[1].strip())
    except InvalidCredentials as e:
        raise HTTPException(status_code=401, detail={"error": e.code, "message": e.message})


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    if identity.role != Role.admin:
        raise HTTPException(status_code=403, detail={"error": "forbidden", "message": "Admin access required"})
    return identity


def reset_container() -> None:
    """Drop cached singletons so the next request rebuilds them from settings."""
    for provider in (get_booking_store, get_catalog, get_identity_store, get_booking_ledger, get_login_use_case):
        provider.cache_clear()
