"""
User-centric helpers:
• create_user        – persist an already validated registration
• get_user_by_slug   – public profile lookup
"""

import logging
from datetime import datetime, timezone

from motor.motor_asyncio import AsyncIOMotorDatabase
from passlib.context import CryptContext
from pymongo.errors import DuplicateKeyError

from ..core.config import Settings
from ..models.user import UserCreate, UserOut
from .slugs import fallback_slug, generate_url, slugify

log = logging.getLogger("users")


class UserError(Exception):
    """Base exception for the user workflow."""


class UserExistsError(UserError):
    """Raised when the e-mail already belongs to a stored user."""


class SlugConflictError(UserError):
    """Raised when every slug candidate was taken by concurrent inserts."""


_INSERT_ATTEMPTS = 3

# ────────────────────────── password hashing ───────────────────────────
pwd_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")


def _hash(pw: str) -> str:
    return pwd_ctx.hash(pw)


# ────────────────────────── slug allocation ────────────────────────────
async def _unique_slug(db: AsyncIOMotorDatabase, text: str) -> str:
    """
    Slug for `text`, suffixed -2, -3 … until free.  Text that slugifies
    to nothing gets a random placeholder instead.
    """
    base = slugify(text) or fallback_slug()
    candidate, n = base, 2
    while await db.users.find_one({"slug": candidate}, {"_id": 1}):
        candidate = f"{base}-{n}"
        n += 1
    return candidate


# ────────────────────────── CRUD helpers ───────────────────────────────
def _to_out(doc: dict) -> UserOut:
    return UserOut(
        id=str(doc["_id"]),
        name=doc["name"],
        about=doc["about"],
        email=doc["email"],
        avatar=doc["avatar"],
        slug=doc["slug"],
        url=doc["url"],
        created_at=doc["created_at"],
    )


async def _find_user_by_email(db: AsyncIOMotorDatabase, email: str):
    return await db.users.find_one({"email": email})


async def create_user(
    db: AsyncIOMotorDatabase, payload: UserCreate, settings: Settings
) -> UserOut:
    """
    Inserts a new user document (raises UserExistsError if the e-mail is
    taken).  The credentials are stored as given; only the password is
    replaced by its bcrypt hash.
    """
    if await _find_user_by_email(db, payload.email):
        raise UserExistsError("E-mail already registered")

    slug = await _unique_slug(db, payload.name)
    doc = {
        "name": payload.name,
        "about": payload.about,
        "email": payload.email,
        "avatar": payload.avatar,
        "hashed_pw": _hash(payload.password),
        "created_at": datetime.now(timezone.utc),
    }
    candidates = [slug] + [fallback_slug(slug) for _ in range(_INSERT_ATTEMPTS - 1)]
    for candidate in candidates:
        doc.pop("_id", None)
        doc["slug"] = candidate
        doc["url"] = generate_url(candidate, settings.public_base_url)
        try:
            res = await db.users.insert_one(doc)
            break
        except DuplicateKeyError as exc:
            # lost a race: either the e-mail or the slug was taken meanwhile
            if await _find_user_by_email(db, payload.email):
                raise UserExistsError("E-mail already registered") from exc
            log.warning("Slug %s taken during insert, retrying", candidate)
    else:
        raise SlugConflictError("Could not allocate a free profile slug")

    doc["_id"] = res.inserted_id
    log.info("Created user %s (%s)", doc["slug"], doc["_id"])
    return _to_out(doc)


async def get_user_by_slug(db: AsyncIOMotorDatabase, slug: str) -> UserOut | None:
    doc = await db.users.find_one({"slug": slug})
    return _to_out(doc) if doc else None
