"""Demo world for development/testing: sample data plus minimal player and trading."""

from __future__ import annotations

import json
from pathlib import Path

from npc_dialogue.collaborators import DeathError, MessageSink
from npc_dialogue.models import Item, Npc

DEMO_ITEMS = {
    "potion_health": {"name": "Health Potion", "description": "Restores a little health."},
    "wmac1": {"name": "Mace", "description": "A heavy iron mace."},
}

DEMO_NPCS = {
    "recruiter": {
        "name": "Recruiter",
        "allies": ["Recruit"],
        "enemies": ["Brotherhood Member"],
        "conversations": [
            {"player": "", "text": "Hail, recruit. Looking for work?",
             "condition": "ally", "action": "none", "response": [2, 3, 4]},
            {"player": "", "text": "You're not welcome here, brother.",
             "condition": "enemy", "action": "attack"},
            {"player": "What do you have for sale?", "text": "Take a look.",
             "condition": "none", "action": "trade", "response": [5]},
            {"player": "Any harder jobs?", "text": "Come back with a potion and we'll talk.",
             "condition": "level=3", "action": "none"},
            {"player": "Goodbye.", "text": "Stay sharp.",
             "condition": "none", "action": "none"},
            {"player": "I have a potion now.", "text": "Good. Clear out the sewers.",
             "condition": "item=potion_health", "action": "none"},
        ],
    },
    "guide": {
        "name": "Guide",
        "allies": [],
        "enemies": [],
        "conversations": [
            {"player": "", "text": "Hello", "condition": "none", "action": "none",
             "response": [1]},
            {"player": "Bye", "text": "Farewell", "condition": "none", "action": "none"},
        ],
    },
    "sewer_rat": {"name": "Sewer Rat", "allies": [], "enemies": []},
}


def create_demo_data(data_dir: Path) -> None:
    """Write `npcs.json` and `items.json` into `data_dir`, replacing existing ones."""
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "npcs.json").write_text(json.dumps({"npcs": DEMO_NPCS}, indent=2))
    (data_dir / "items.json").write_text(json.dumps({"items": DEMO_ITEMS}, indent=2))


class DemoPlayer:
    """A bare-bones player: stats, an inventory of item ids, and one-blow combat.

    Each attack costs `blow` health; reaching zero raises DeathError.
    """

    def __init__(
        self,
        sink: MessageSink,
        name: str = "player",
        character_type: str = "Recruit",
        level: int = 1,
        health: int = 20,
        blow: int = 10,
    ) -> None:
        self._sink = sink
        self.name = name
        self.current_character_type = character_type
        self.level = level
        self.health = health
        self.health_max = health
        self.blow = blow
        self.inventory: list[str] = []

    def has_item(self, item: Item) -> bool:
        return item.id in self.inventory

    def attack(self, target_name: str) -> None:
        self.health -= self.blow
        self._sink.offer(f"{target_name} hits you for {self.blow}.")
        if self.health <= 0:
            raise DeathError(f"{self.name} was killed by {target_name}")


class DemoTrading:
    """Sells the player every item on the shelf in one go."""

    def __init__(self, npc: Npc, player: DemoPlayer, sink: MessageSink, shelf: list[Item]) -> None:
        self._npc = npc
        self._player = player
        self._sink = sink
        self._shelf = shelf

    def trade(self, allow_buy: bool, allow_sell: bool) -> None:
        if not allow_buy:
            self._sink.offer(f"{self._npc.name} has nothing to sell you.")
            return
        for item in self._shelf:
            self._player.inventory.append(item.id)
            self._sink.offer(f"You buy a {item.name} from {self._npc.name}.")
