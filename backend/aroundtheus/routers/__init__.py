from fastapi import APIRouter

from . import root, users

api_router = APIRouter()
api_router.include_router(root.router)
api_router.include_router(users.router)
