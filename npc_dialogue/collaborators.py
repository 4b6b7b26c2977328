"""Interfaces the dialogue engine consumes from the surrounding simulation.

The engine only talks to the game through these protocols:

    Player          — stats, inventory membership and the combat entry point
    NpcLookup       — NPC record by id
    ItemCatalog     — item record by id
    Trading         — one trade session between an NPC and the player
    MessageSink     — ordered, append-only player-visible output
    ChoiceProvider  — lives in npc_dialogue.menu

Production code passes the game's own objects; tests use the in-memory
`QueueSink` below and simple fakes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from npc_dialogue.models import Item, Npc

logger = logging.getLogger(__name__)


class DeathError(Exception):
    """The player died. Ends the conversation and whatever called it."""


# ---------------------------------------------------------------------------
# Simulation protocols
# ---------------------------------------------------------------------------

class Player(Protocol):
    name: str
    current_character_type: str
    level: int
    health: int
    health_max: int

    def has_item(self, item: Item) -> bool: ...

    def attack(self, target_name: str) -> None:
        """Engage `target_name` in combat. May raise DeathError."""
        ...


class NpcLookup(Protocol):
    def get_npc(self, npc_id: str) -> Npc: ...


class ItemCatalog(Protocol):
    def get_item(self, item_id: str) -> Item: ...


class Trading(Protocol):
    def trade(self, allow_buy: bool, allow_sell: bool) -> None: ...


TradingFactory = Callable[[Npc, Player], Trading]


# ---------------------------------------------------------------------------
# Message sinks
# ---------------------------------------------------------------------------

class MessageSink(Protocol):
    def offer(self, text: str) -> None: ...


class QueueSink:
    """Collects offered text in order. No I/O."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def offer(self, text: str) -> None:
        self.messages.append(text)

    def clear(self) -> None:
        self.messages.clear()


class ConsoleSink:
    """Prints offered text to stdout."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write

    def offer(self, text: str) -> None:
        logger.debug("offer len=%d", len(text))
        self._write(text)
