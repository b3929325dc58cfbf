"""
Pizza catalog: the fixed id -> (name, unit price) table offered on the order form.

The catalog is built once when the app starts and shared read-only through
``app.state``; request handlers receive it via the ``get_catalog`` dependency.
"""
import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional

from fastapi import Request
from pydantic import BaseModel, TypeAdapter


class CatalogEntry(BaseModel):
    id: int
    name: str
    unit_price: float

    class Config:
        frozen = True


DEFAULT_CATALOG = (
    CatalogEntry(id=1, name="Margherita", unit_price=199.0),
    CatalogEntry(id=2, name="Pepperoni", unit_price=249.0),
    CatalogEntry(id=3, name="Veggie Delight", unit_price=329.0),
)


class Catalog:
    def __init__(self, entries: Iterable[CatalogEntry] = DEFAULT_CATALOG):
        self._entries = MappingProxyType({entry.id: entry for entry in entries})

    def name_of(self, pizza_id: int) -> Optional[str]:
        entry = self._entries.get(pizza_id)
        return entry.name if entry else None

    def unit_price_of(self, pizza_id: int) -> float:
        # Unknown ids are charged nothing rather than rejected
        entry = self._entries.get(pizza_id)
        return entry.unit_price if entry else 0.0

    def names(self) -> Dict[int, str]:
        return {pizza_id: entry.name for pizza_id, entry in sorted(self._entries.items())}

    def entries(self) -> List[CatalogEntry]:
        return [self._entries[pizza_id] for pizza_id in sorted(self._entries)]

    def __contains__(self, pizza_id) -> bool:
        return pizza_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_entries_adapter = TypeAdapter(List[CatalogEntry])


def load_catalog(path: Optional[str] = None) -> Catalog:
    """
    Build the catalog from a JSON list of entries, or the built-in menu.

    ``path`` falls back to the PIZZA_CATALOG_PATH environment variable.
    A file that does not match the entry shape raises pydantic's ValidationError.
    """
    path = path or os.getenv("PIZZA_CATALOG_PATH")
    if not path:
        return Catalog()

    entries = _entries_adapter.validate_json(Path(path).read_text(encoding="utf-8"))
    return Catalog(entries)


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog
