"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Geometry
    default_box_size: float = 200.0
    round_rect_path_default_adj: float = 0.1
    round_rect_keypoint_default_adj: float = 0.5
    path_precision: int = 2

    # Color
    modifier_order: str = "canonical"  # canonical | encounter
    hue_sat_passthrough: bool = False

    # Batch resolution
    batch_max_workers: int = 8

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "SLIDESHAPE_",
    }


settings = Settings()
