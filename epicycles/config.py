"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

# A stylised "1", in canvas pixel coordinates.
DEFAULT_SHAPE = (
    "547.14 196.31 547.14 276.39 684.84 207.54 684.84 742.7 538.84 742.7 "
    "538.84 812.53 901.16 812.53 901.16 742.7 764.3 742.52 763.8 119.47 "
    "698.4 119.47 547.14 196.31"
)


class Settings(BaseSettings):
    epicycles_env: str = "development"
    epicycles_log_level: str = "info"

    # Host surface
    canvas_width: float = 1440.0
    canvas_height: float = 932.0

    default_shape: str = DEFAULT_SHAPE

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
