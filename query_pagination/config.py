from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Query Pagination"
    app_version: str = "0.1.0"
    env: str = "development"
    debug: bool = False

    # Defaults for the pagination middleware installed by create_app
    pagination_page_text: str = "page"
    pagination_size_text: str = "size"
    pagination_default_page: int = 1
    pagination_default_page_size: int = 10
    pagination_min_page_size: int = 10
    pagination_max_page_size: int = 100
    pagination_header_prefix: str = "X-"


settings = Settings()
