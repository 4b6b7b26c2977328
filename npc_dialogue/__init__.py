"""Scripted NPC dialogue: authored graphs, gated choices, triggered actions.

Typical wiring:

    store = DialogueStore.from_file(data_dir / "npcs.json")
    manager = ConversationManager(store, items, sink, choices, trading)
    manager.start_conversation(npc, player)
"""

from npc_dialogue.collaborators import (  # noqa: F401
    ConsoleSink,
    DeathError,
    MessageSink,
    QueueSink,
)
from npc_dialogue.conversation import ConversationManager  # noqa: F401
from npc_dialogue.graph import (  # noqa: F401
    ActionKind,
    Condition,
    ConditionKind,
    DialogueDataError,
    DialogueGraph,
    DialogueNode,
)
from npc_dialogue.menu import ConsoleMenu, ScriptedChoices  # noqa: F401
from npc_dialogue.repository import ItemRepository, NpcRepository, RepositoryError  # noqa: F401
from npc_dialogue.store import DialogueStore  # noqa: F401
