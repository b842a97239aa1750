"""JSON-file-backed implementation of MenuRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.value_objects import Money, Name, Quantity
from kitchenpos.domain.repository.menu_repository import MenuRepository


class JsonMenuRepository(MenuRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- MenuRepository interface ---------------------------------------------

    def get_by_id(self, menu_id: str) -> Menu | None:
        for raw in self._load_raw():
            if raw["id"] == menu_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Menu]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def find_all_by_product_id(self, product_id: str) -> list[Menu]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if any(mp["product_id"] == product_id for mp in raw["menu_products"])
        ]

    def save(self, menu: Menu) -> None:
        menus = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(menus):
            if raw["id"] == menu.id:
                menus[i] = self._to_raw(menu)
                replaced = True
                break
        if not replaced:
            menus.append(self._to_raw(menu))

        self._persist_raw(menus)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(menu: Menu) -> dict:
        return {
            "id": menu.id,
            "name": menu.name.value,
            "price": str(menu.price.amount),
            "currency": menu.price.currency,
            "displayed": menu.displayed,
            "menu_group_id": menu.menu_group_id,
            "menu_products": [
                {"product_id": mp.product_id, "quantity": mp.quantity.value}
                for mp in menu.menu_products
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Menu:
        return Menu(
            id=raw["id"],
            name=Name(raw["name"]),
            price=Money(Decimal(raw["price"]), raw.get("currency", "KRW")),
            menu_products=[
                MenuProduct(product_id=mp["product_id"], quantity=Quantity(mp["quantity"]))
                for mp in raw["menu_products"]
            ],
            displayed=raw["displayed"],
            menu_group_id=raw.get("menu_group_id"),
        )

    # --- File I/O -------------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, menus: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(menus, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
