from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Route guard destinations
    LOGIN_PATH: str = "/login"
    PRO_APP_PATH: str = "/pro/download-app"
    CLIENT_HOME_PATH: str = "/my-bookings"
    RETURN_URL_PARAM: str = "returnUrl"

    # Error boundary
    GENERIC_ERROR_MESSAGE: str = "An error occurred"
    # Unhandled exception text reaches clients only when explicitly enabled.
    EXPOSE_INTERNAL_ERRORS: bool = False

    # Order chat
    CHAT_CLOSE_HOURS_AFTER_COMPLETED: int = 24

    # App
    APP_ENV: str = "development"
    APP_URL: str = "http://localhost:8000"
    ALLOWED_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
