"""JSON-backed NPC and item repositories.

Both are read-only after construction and keyed by id:

    npcs.json   {"npcs":  {"<id>": {"name": ..., "allies": [...], "enemies": [...], ...}}}
    items.json  {"items": {"<id>": {"name": ..., "description": ...}}}

Only the fields the dialogue engine reads are validated; anything else in the
document (conversations, stats, loot tables) is ignored here.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from npc_dialogue.models import Item, Npc

logger = logging.getLogger(__name__)


class RepositoryError(KeyError):
    """Raised for unknown ids and unreadable repository data."""


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text())


def _section(data: Any, key: str, path: Path) -> dict[str, Any]:
    if not isinstance(data, dict) or not isinstance(data.get(key), dict):
        raise RepositoryError(f"{path}: expected a top-level {key!r} object")
    return data[key]


class NpcRepository:
    def __init__(self, npcs: Mapping[str, Npc]) -> None:
        self._npcs = dict(npcs)

    @classmethod
    def from_data(cls, raw: Mapping[str, Any]) -> NpcRepository:
        """Build from the `npcs` object of the document, keyed by id."""
        npcs: dict[str, Npc] = {}
        for npc_id, details in raw.items():
            try:
                npcs[npc_id] = Npc.model_validate({**details, "id": npc_id})
            except ValidationError as e:
                raise RepositoryError(f"NPC {npc_id!r}: {e}") from e
        return cls(npcs)

    @classmethod
    def from_file(cls, path: Path) -> NpcRepository:
        repo = cls.from_data(_section(_read_json(path), "npcs", path))
        logger.info("Loaded %d NPCs from %s", len(repo), path)
        return repo

    def __len__(self) -> int:
        return len(self._npcs)

    def __contains__(self, npc_id: object) -> bool:
        return npc_id in self._npcs

    def ids(self) -> list[str]:
        return list(self._npcs)

    def get_npc(self, npc_id: str) -> Npc:
        try:
            return self._npcs[npc_id]
        except KeyError:
            raise RepositoryError(f"No NPC with id {npc_id!r}") from None

    def find_by_name(self, name: str) -> Npc | None:
        """Case-insensitive name match; the last match wins."""
        found = None
        for npc in self._npcs.values():
            if npc.name.lower() == name.lower():
                found = npc
        return found


class ItemRepository:
    def __init__(self, items: Mapping[str, Item]) -> None:
        self._items = dict(items)

    @classmethod
    def from_data(cls, raw: Mapping[str, Any]) -> ItemRepository:
        items: dict[str, Item] = {}
        for item_id, details in raw.items():
            try:
                items[item_id] = Item.model_validate({**details, "id": item_id})
            except ValidationError as e:
                raise RepositoryError(f"Item {item_id!r}: {e}") from e
        return cls(items)

    @classmethod
    def from_file(cls, path: Path) -> ItemRepository:
        repo = cls.from_data(_section(_read_json(path), "items", path))
        logger.info("Loaded %d items from %s", len(repo), path)
        return repo

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def get_item(self, item_id: str) -> Item:
        try:
            return self._items[item_id]
        except KeyError:
            raise RepositoryError(f"No item with id {item_id!r}") from None
