"""Conversation driver — walks one NPC's dialogue graph with the player.

Flow of one `start_conversation()` call:

  1. Select entry: first line (authored order) with an empty player prompt
     whose condition holds. None → return silently.
  2. Emit the line's text to the sink, then fire its action. A DeathError from
     the action propagates straight out; nothing further is emitted.
  3. Filter the line's responses by condition (re-evaluated now, after the
     action) and let the player pick one. No candidates → done.
  4. The picked line becomes current; back to 2.

There is no depth limit or cycle guard: a graph that loops through satisfiable
lines keeps talking until the player picks a way out.
"""

from __future__ import annotations

import logging
from enum import Enum

from npc_dialogue.actions import ActionDispatcher
from npc_dialogue.collaborators import ItemCatalog, MessageSink, Player, TradingFactory
from npc_dialogue.conditions import matches
from npc_dialogue.graph import DialogueGraph, DialogueNode
from npc_dialogue.menu import ChoiceProvider
from npc_dialogue.models import Npc
from npc_dialogue.store import DialogueStore

logger = logging.getLogger(__name__)


class ConversationState(Enum):
    SELECTING_ENTRY = "selecting_entry"
    EMITTING_LINE = "emitting_line"
    AWAITING_CHOICE = "awaiting_choice"
    TERMINATED = "terminated"


class ConversationManager:
    """Runs conversations against a loaded DialogueStore.

    Args:
        store:    Graphs for every NPC, loaded once at startup.
        items:    Item catalog used by `item=` conditions.
        sink:     Receives every spoken line and action notice, in order.
        choices:  Asks the player to pick among the available responses.
        trading:  Opens a trade session between an NPC and the player.
    """

    def __init__(
        self,
        store: DialogueStore,
        items: ItemCatalog,
        sink: MessageSink,
        choices: ChoiceProvider,
        trading: TradingFactory,
    ) -> None:
        self._store = store
        self._items = items
        self._sink = sink
        self._choices = choices
        self._actions = ActionDispatcher(sink, trading)

    def start_conversation(self, npc: Npc, player: Player) -> None:
        graph = self._store.graph_for(npc)
        if graph is None:
            logger.debug("No conversation for npc=%s", npc.id)
            return

        self._log_state(npc, ConversationState.SELECTING_ENTRY)
        current = self.find_entry(graph, npc, player)
        while current is not None:
            self._log_state(npc, ConversationState.EMITTING_LINE, current.index)
            self._sink.offer(current.text)
            self._actions.trigger(current.action, npc, player)

            self._log_state(npc, ConversationState.AWAITING_CHOICE, current.index)
            current = self._next_line(graph, current, npc, player)

        self._log_state(npc, ConversationState.TERMINATED)

    # ------------------------------------------------------------------
    # Graph queries
    # ------------------------------------------------------------------

    def find_entry(self, graph: DialogueGraph, npc: Npc, player: Player) -> DialogueNode | None:
        for node in graph.entry_candidates():
            if matches(node.condition, npc, player, self._items):
                return node
        return None

    def available_responses(
        self, graph: DialogueGraph, node: DialogueNode, npc: Npc, player: Player
    ) -> list[DialogueNode]:
        """Responses whose condition holds right now, in authored order."""
        options = [
            target for target in graph.targets(node)
            if matches(target.condition, npc, player, self._items)
        ]
        logger.debug(
            "responses npc=%s line=%d candidates=%s available=%s",
            npc.id, node.index, list(node.outgoing), [o.index for o in options],
        )
        return options

    def _next_line(
        self, graph: DialogueGraph, node: DialogueNode, npc: Npc, player: Player
    ) -> DialogueNode | None:
        options = self.available_responses(graph, node, npc, player)
        if not options:
            return None
        picked = self._choices.choose([o.player_prompt for o in options])
        if picked is None:
            return None
        return options[picked]

    @staticmethod
    def _log_state(npc: Npc, state: ConversationState, index: int | None = None) -> None:
        logger.debug("conversation npc=%s state=%s line=%s", npc.id, state.value, index)
