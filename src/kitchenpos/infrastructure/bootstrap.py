"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Settings come from the environment and are read on every call, so a
test can point the CLI at a temporary directory with ``monkeypatch``.
"""

from __future__ import annotations

import os
from pathlib import Path

from kitchenpos.infrastructure.persistence.json_menu_repository import (
    JsonMenuRepository,
)
from kitchenpos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from kitchenpos.infrastructure.profanity.purgomalum_client import (
    DEFAULT_BASE_URL,
    PurgomalumClient,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.environ.get("KITCHENPOS_DATA_DIR", _DEFAULT_DATA_DIR))


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def menu_repository() -> JsonMenuRepository:
    return JsonMenuRepository(data_dir() / "menus.json")


def profanity_checker() -> PurgomalumClient:
    """Build the PurgoMalum client. Callers own it and must close it."""
    return PurgomalumClient(
        base_url=os.environ.get("KITCHENPOS_PURGOMALUM_URL", DEFAULT_BASE_URL),
        timeout=float(os.environ.get("KITCHENPOS_HTTP_TIMEOUT", "5.0")),
    )
