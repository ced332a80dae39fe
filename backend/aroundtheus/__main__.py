import uvicorn

from .core.config import get_settings


def run() -> None:
    s = get_settings()
    uvicorn.run("aroundtheus.main:app", host=s.host, port=s.port, log_level=s.log_level.lower())


if __name__ == "__main__":
    run()
