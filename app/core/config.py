from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    api_base_url: str = "http://localhost:8080/api"
    request_timeout: float = 30.0
    polling_interval_seconds: float = 15.0
    cors_origins: List[str] = [
        "http://localhost",
        "http://localhost:3000",
    ]
    log_level: str = "INFO"
    seed_request_delay: float = 0.1
    seed_order_delay: float = 0.2
    seed_item_delay: float = 0.05

    class Config:
        env_file = ".env"


settings = Settings()
