from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./olympiad.db"
    COMPETITOR_ROLE_ID: int = 2
    MIN_COMPETITOR_AGE: int = 9
    MAX_COMPETITOR_AGE: int = 18
    HASH_INITIAL_PASSWORD: bool = False # When enabled the seed password is stored as a bcrypt hash
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
