from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Query Paging API"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    log_json: bool = False
    count_header: str = "X-Records"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
