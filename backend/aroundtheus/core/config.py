from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field, MongoDsn
class Settings(BaseSettings):
    mongo_uri: MongoDsn = "mongodb://localhost:27017/aroundtheus"
    public_base_url: str = "http://localhost:3001"
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    password_min_length: int = Field(8, ge=4)
    class Config: env_file = ".env"
@lru_cache
def get_settings() -> Settings: return Settings()
