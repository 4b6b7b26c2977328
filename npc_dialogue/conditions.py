"""Condition predicate — decides whether a dialogue node is currently reachable.

`matches()` is a pure function of the current NPC and player state; it can be
called any number of times in any order.
"""

from __future__ import annotations

from npc_dialogue.collaborators import ItemCatalog, Player
from npc_dialogue.graph import Condition, ConditionKind
from npc_dialogue.models import Npc


def matches(condition: Condition, npc: Npc, player: Player, items: ItemCatalog) -> bool:
    kind = condition.kind
    if kind is ConditionKind.NONE:
        return True
    if kind is ConditionKind.ALLY:
        return player.current_character_type in npc.allies
    if kind is ConditionKind.ENEMY:
        return player.current_character_type in npc.enemies
    if kind is ConditionKind.LEVEL:
        # ValueError on a non-integer parameter
        return player.level >= int(condition.parameter)
    if kind is ConditionKind.ITEM:
        return player.has_item(items.get_item(condition.parameter))
    if kind is ConditionKind.CHAR_TYPE:
        return condition.parameter == player.current_character_type
    raise AssertionError(f"Unhandled condition kind {kind!r}")
