from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the protein tracker."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("PROTEIN_DATA_ROOT") or data_root_default
        ).expanduser()
        # Browser-style local storage: one JSON object of key -> serialized value.
        self.store_path: Path = Path(
            os.environ.get("PROTEIN_STORE_PATH") or (self.data_root / "local_storage.json")
        ).expanduser()
        self.catalog_key: str = os.environ.get("PROTEIN_CATALOG_KEY") or "milk_powders"
        self.default_weight_jin: float = max(
            0.0, float(os.environ.get("PROTEIN_DEFAULT_WEIGHT_JIN") or "30")
        )
        self.log_level: str = (os.environ.get("PROTEIN_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("PROTEIN_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
