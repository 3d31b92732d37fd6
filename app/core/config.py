from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    NAVIGATION_DELAY_MS: int = 5000
    NOTIFICATION_DURATION_MS: int = 5000
    HOME_PATH: str = "/"
    CURRENCY_SYMBOL: str = "₹"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
