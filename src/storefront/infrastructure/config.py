from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[3]
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_path(*keys: str, default: Path) -> Path:
    v = _get_env(*keys)
    return Path(v) if v is not None else default


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    catalog_file: Path
    cart_file: Path
    export_dir: Path
    currency: str
    log_level: str


def load_settings() -> Settings:
    """Read settings from the environment (and the project's .env)."""
    data_dir = _get_path("STOREFRONT_DATA_DIR", default=ROOT_DIR / "data")
    return Settings(
        data_dir=data_dir,
        catalog_file=_get_path("STOREFRONT_CATALOG_FILE", default=data_dir / "products.json"),
        cart_file=_get_path("STOREFRONT_CART_FILE", default=data_dir / "cart.json"),
        export_dir=_get_path("STOREFRONT_EXPORT_DIR", default=ROOT_DIR / "exports"),
        currency=(_get_env("STOREFRONT_CURRENCY", default="CLP") or "CLP").upper(),
        log_level=(_get_env("STOREFRONT_LOG_LEVEL", default="WARNING") or "WARNING").upper(),
    )
