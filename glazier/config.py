from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./glazier.db"
    COMPANY_NAME: str = "Glazier Windows & Doors"
    COMPANY_EMAIL: str = "ventas@glazier.example"
    COMPANY_PHONE: str = ""
    CURRENCY_SYMBOL: str = "$"
    DEFAULT_MATERIAL_FAMILY: str = "aluminum"
    PRICE_ADJUSTMENT_PCT_DEFAULT: float = 0.0
    QUOTE_VALID_DAYS: int = 15

    class Config:
        env_file = ".env"


settings = Settings()
