"""Action dispatcher — runs the side effect bound to a dialogue node.

    ATTACK  → hostility notice, then player.attack(npc.name); may raise DeathError
    TRADE   → trading session with both buying and selling allowed
    others  → no effect (BUY, SELL, GIVE, TAKE are reserved tags)
"""

from __future__ import annotations

import logging

from npc_dialogue.collaborators import MessageSink, Player, TradingFactory
from npc_dialogue.graph import ActionKind
from npc_dialogue.models import Npc

logger = logging.getLogger(__name__)


class ActionDispatcher:
    def __init__(self, sink: MessageSink, trading: TradingFactory) -> None:
        self._sink = sink
        self._trading = trading

    def trigger(self, action: ActionKind, npc: Npc, player: Player) -> None:
        if action is ActionKind.ATTACK:
            logger.debug("action attack npc=%s", npc.id)
            self._sink.offer(f"\n{npc.name} is now attacking you!\n")
            player.attack(npc.name)

        elif action is ActionKind.TRADE:
            logger.debug("action trade npc=%s", npc.id)
            self._trading(npc, player).trade(allow_buy=True, allow_sell=True)

        elif action is not ActionKind.NONE:
            logger.debug("action %s has no effect (npc=%s)", action.value, npc.id)
