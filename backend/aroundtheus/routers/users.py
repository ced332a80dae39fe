# backend/aroundtheus/routers/users.py
#
# User routes:
#   • POST /users        – JSON body → validate → create user
#   • GET  /users/{slug} – public profile lookup
#
# Validation runs before any database access; the rejection codes in the
# 400 body are the exact strings the front-end shows to the user.

import logging
import re
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..core.config import Settings, get_settings
from ..models.user import UserCreate, UserCreated, UserOut
from ..services.database import get_db
from ..services.users import UserError, create_user, get_user_by_slug
from ..services.validation import build_password_pattern, validate_user_input

log = logging.getLogger("users")
router = APIRouter(prefix="/users", tags=["users"])


@lru_cache
def _password_pattern(min_length: int) -> re.Pattern[str]:
    return build_password_pattern(min_length)


# ───────────────────────────── create ────────────────────────────────
@router.post(
    "",
    response_model=UserCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Validate credentials and create a user",
)
async def create(
    payload: UserCreate,
    db: AsyncIOMotorDatabase = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Returns **201** with the stored record, **400** with the validation
    verdict (`isValidated`, `message`, `error`) when the e-mail or password
    is rejected, **409** when the e-mail is already registered or no free slug
    could be allocated.
    """
    verdict = validate_user_input(
        {"email": payload.email, "password": payload.password},
        password_pattern=_password_pattern(settings.password_min_length),
    )
    if not verdict.is_validated:
        log.info("Rejected registration: %s", verdict.error.value)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=verdict.model_dump(by_alias=True, mode="json"),
        )

    try:
        user = await create_user(db, payload, settings)
    except UserError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc

    return UserCreated(message=verdict.message, data=user)


# ────────────────────────────── read ─────────────────────────────────
@router.get("/{slug}", response_model=UserOut)
async def read(slug: str, db: AsyncIOMotorDatabase = Depends(get_db)) -> UserOut:
    user = await get_user_by_slug(db, slug)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
