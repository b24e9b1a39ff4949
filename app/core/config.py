from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    RENTAL_STORE_BACKEND: str = "memory"  # "memory" or "sql"
    DATABASE_URL: str = "sqlite:///./rentals.db"

    BASE_DAY_RENTAL: float = 100.0
    BASE_KM_PRICE: float = 2.0

    API_TITLE: str = "Car Rental Service"
    API_DESCRIPTION: str = "Checkout and return of rental cars with cost calculation"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
