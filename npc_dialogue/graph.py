"""Dialogue graph — immutable nodes and index-based edges.

Each NPC's conversation is an ordered tuple of `DialogueNode`s. A node's
position in the tuple is its `index`, and `outgoing` holds indices into the
same tuple, so the graph never holds references between nodes.

Authored tags are translated through explicit lookup tables:

    condition  "none" | "ally" | "enemy" | "level=N" | "item=ID" | "char type=T"
    action     "none" | "attack" | "buy" | "sell" | "trade" | "give" | "take"
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

from pydantic import ValidationError

from npc_dialogue.models import ConversationLine


class ConditionKind(Enum):
    NONE = "none"
    ALLY = "ally"
    ENEMY = "enemy"
    LEVEL = "level"
    ITEM = "item"
    CHAR_TYPE = "char type"


class ActionKind(Enum):
    NONE = "none"
    ATTACK = "attack"
    BUY = "buy"
    SELL = "sell"
    TRADE = "trade"
    GIVE = "give"
    TAKE = "take"


CONDITION_KINDS: dict[str, ConditionKind] = {k.value: k for k in ConditionKind}
ACTION_KINDS: dict[str, ActionKind] = {k.value: k for k in ActionKind}


class DialogueDataError(ValueError):
    """Raised when authored dialogue data cannot be turned into a graph."""


@dataclass(frozen=True)
class Condition:
    kind: ConditionKind = ConditionKind.NONE
    parameter: str = ""

    @classmethod
    def parse(cls, token: str) -> Condition:
        """Parse an authored `"kind"` or `"kind=parameter"` token.

        "level=5"      → Condition(LEVEL, "5")
        "char type=Recruit" → Condition(CHAR_TYPE, "Recruit")
        "none"         → Condition(NONE, "")
        """
        name, _, parameter = token.partition("=")
        kind = CONDITION_KINDS.get(name)
        if kind is None:
            raise DialogueDataError(f"Unknown condition {name!r} in {token!r}")
        if kind is ConditionKind.LEVEL:
            try:
                int(parameter)
            except ValueError as e:
                raise DialogueDataError(
                    f"Level condition needs an integer, got {parameter!r}"
                ) from e
        return cls(kind, parameter)


def parse_action(token: str) -> ActionKind:
    try:
        return ACTION_KINDS[token]
    except KeyError:
        raise DialogueDataError(f"Unknown action {token!r}") from None


@dataclass(frozen=True)
class DialogueNode:
    """One authored line: prompt, spoken text, gating condition, edges, action."""

    index: int
    player_prompt: str
    text: str
    condition: Condition = Condition()
    outgoing: tuple[int, ...] = ()
    action: ActionKind = ActionKind.NONE

    @property
    def is_entry(self) -> bool:
        """Entry lines are NPC-initiated: the player prompt is empty."""
        return self.player_prompt == ""


@dataclass(frozen=True)
class DialogueGraph:
    npc_id: str
    nodes: tuple[DialogueNode, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[DialogueNode]:
        return iter(self.nodes)

    def node(self, index: int) -> DialogueNode:
        return self.nodes[index]

    def entry_candidates(self) -> list[DialogueNode]:
        """Entry nodes in authored order, before condition filtering."""
        return [n for n in self.nodes if n.is_entry]

    def targets(self, node: DialogueNode) -> list[DialogueNode]:
        return [self.nodes[i] for i in node.outgoing]


def build_node(index: int, raw: object) -> DialogueNode:
    """Translate one authored element into a node at position `index`."""
    try:
        line = ConversationLine.model_validate(raw)
    except ValidationError as e:
        raise DialogueDataError(f"Line {index}: {e}") from e
    try:
        condition = Condition.parse(line.condition)
        action = parse_action(line.action)
    except DialogueDataError as e:
        raise DialogueDataError(f"Line {index}: {e}") from e
    return DialogueNode(
        index=index,
        player_prompt=line.player,
        text=line.text,
        condition=condition,
        outgoing=tuple(line.response),
        action=action,
    )


def build_graph(npc_id: str, conversation: Sequence[object]) -> DialogueGraph:
    """Build a complete graph or raise `DialogueDataError`; never a partial one."""
    nodes = tuple(build_node(i, raw) for i, raw in enumerate(conversation))
    for node in nodes:
        for target in node.outgoing:
            if not 0 <= target < len(nodes):
                raise DialogueDataError(
                    f"Line {node.index} responds to missing line {target}"
                )
    return DialogueGraph(npc_id=npc_id, nodes=nodes)
