"""Core data models.

Two groups of types live here:

  * the authored document schema (`NpcDocument` → `NpcEntry` →
    `ConversationLine`), validated with pydantic when the dialogue store and
    the repositories read `npcs.json`;
  * the world records the dialogue engine reads (`Npc`, `Item`).

Pydantic is used for validation at every data boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConversationLine(BaseModel):
    """One authored element of an NPC's `conversations` array."""

    model_config = ConfigDict(extra="ignore")

    player: str  # "" marks an entry line
    text: str
    condition: str  # "kind" or "kind=parameter"
    action: str
    response: list[int] = Field(default_factory=list)


class NpcEntry(BaseModel):
    """Per-NPC object in the document. Unknown fields are kept as extras."""

    model_config = ConfigDict(extra="allow")

    conversations: list[Any] | None = None


class NpcDocument(BaseModel):
    """Top-level shape of `npcs.json`."""

    npcs: dict[str, Any] = Field(default_factory=dict)  # NpcEntry, validated per NPC


class Npc(BaseModel):
    """A non-player character record."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    allies: frozenset[str] = frozenset()  # character types
    enemies: frozenset[str] = frozenset()


class Item(BaseModel):
    """An item catalog entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    description: str = ""
