from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Parser configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    min_text_length: int = 20
    max_scan_bytes: int = 20 * 1024 * 1024

    raster_engine: str = "pymupdf"
    raster_density: int = 100
    raster_max_width: int = 800
    raster_max_height: int = 1200
