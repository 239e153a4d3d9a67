from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Personal Finance Visualizer"
    VERSION: str = "1.0.0"

    # MongoDB Config
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "finance_visualizer"
    MONGO_COLLECTION: str = "transactions"
    MONGO_TIMEOUT_MS: int = 5000  # server selection timeout, keeps calls bounded

    # Frontend dev servers
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "standard"  # "standard" | "json"

    class Config:
        env_file = ".env"

settings = Settings()
