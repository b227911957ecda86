"""Runtime settings read from the environment.

``.env`` files in the backend directory and the project root are loaded
first, so local development needs no exported variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from roomcost.exceptions import ConfigurationError
from roomcost.services.catalog_client import DEFAULT_TIMEOUT_SECONDS
from roomcost.services.paginator import DEFAULT_MAX_PAGES, DEFAULT_PAGE_SIZE

_backend_dir = Path(__file__).resolve().parent.parent
_project_root = _backend_dir.parent

DEFAULT_BOM_ENDPOINT = "/av-bill-of-materials"
DEFAULT_LEGACY_ENDPOINT = "/room-costs-legacy"


def load_env_files() -> None:
    """Load ``.env`` from the project root and the backend directory."""
    load_dotenv(_project_root / ".env")
    load_dotenv(_backend_dir / ".env")


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from None
    if value < 1:
        msg = f"{name} must be positive, got {value}"
        raise ConfigurationError(msg)
    return value


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        msg = f"{name} must be a number, got {raw!r}"
        raise ConfigurationError(msg) from None
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise ConfigurationError(msg)
    return value


@dataclass(frozen=True)
class CatalogSettings:
    """Connection and paging settings for the BOM catalog."""

    base_url: str
    token: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    max_pages: int = DEFAULT_MAX_PAGES
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    bom_endpoint: str = DEFAULT_BOM_ENDPOINT
    legacy_endpoint: str = DEFAULT_LEGACY_ENDPOINT

    @classmethod
    def from_env(cls) -> CatalogSettings:
        """Build settings from ``ROOMCOST_*`` environment variables.

        Raises ConfigurationError if ROOMCOST_CATALOG_URL is not set or a
        numeric variable is malformed.
        """
        base_url = os.environ.get("ROOMCOST_CATALOG_URL", "").strip()
        if not base_url:
            msg = (
                "ROOMCOST_CATALOG_URL environment variable is not set. "
                "Set it to the catalog API root, e.g. https://backend.example.com/api"
            )
            raise ConfigurationError(msg)

        return cls(
            base_url=base_url,
            token=os.environ.get("ROOMCOST_CATALOG_TOKEN") or None,
            page_size=_int_env("ROOMCOST_PAGE_SIZE", DEFAULT_PAGE_SIZE),
            max_pages=_int_env("ROOMCOST_MAX_PAGES", DEFAULT_MAX_PAGES),
            timeout_seconds=_float_env("ROOMCOST_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            bom_endpoint=os.environ.get("ROOMCOST_BOM_ENDPOINT") or DEFAULT_BOM_ENDPOINT,
            legacy_endpoint=(
                os.environ.get("ROOMCOST_LEGACY_ENDPOINT") or DEFAULT_LEGACY_ENDPOINT
            ),
        )
