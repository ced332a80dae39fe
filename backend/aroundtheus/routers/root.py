from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from ..services.helpers import say_hello
router = APIRouter(tags=["root"])
@router.get("/", response_class=PlainTextResponse)
async def index() -> str:
    return "Hello, world!"
@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}
@router.get("/greet")
async def greet(first_name: str, last_name: str) -> dict:
    return {"greeting": say_hello(first_name, last_name)}
