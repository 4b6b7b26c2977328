"""NPC dialogue — dev launcher. Loads the NPC data and lets you talk to NPCs."""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from npc_dialogue import (
    ConsoleMenu,
    ConsoleSink,
    ConversationManager,
    DeathError,
    DialogueStore,
    ItemRepository,
    MessageSink,
    NpcRepository,
)
from npc_dialogue.config import default_data_dir, get_config, items_path, npcs_path
from npc_dialogue.demo import DemoPlayer, DemoTrading, create_demo_data

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

logger = logging.getLogger("npc_dialogue.main")


def command_talk(name: str, npcs: NpcRepository, manager: ConversationManager,
                 player: DemoPlayer, sink: MessageSink) -> None:
    npc = npcs.find_by_name(name)
    if npc is None:
        sink.offer(f"Unable to talk to {name}")
        return
    manager.start_conversation(npc, player)


def main():
    parser = argparse.ArgumentParser(description="NPC dialogue dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Directory holding npcs.json and items.json (default: ./data)")
    parser.add_argument("--demo", action="store_true",
                        help="Write demo NPC and item data into the data directory first")
    parser.add_argument("--char-type", default="Recruit", help="Player character type")
    parser.add_argument("--level", type=int, default=1, help="Player level")
    args = parser.parse_args()

    data_dir = args.data_dir or default_data_dir()
    if args.demo:
        create_demo_data(data_dir)

    config = get_config(data_dir)
    logging.basicConfig(level=config["log_level"],
                        format="%(levelname)s %(name)s: %(message)s")

    npcs = NpcRepository.from_file(npcs_path(data_dir, config))
    items = ItemRepository.from_file(items_path(data_dir, config))
    store = DialogueStore.from_file(npcs_path(data_dir, config), strict=config["strict_load"])

    sink = ConsoleSink()
    player = DemoPlayer(sink, character_type=args.char_type, level=args.level)
    shelf = [items.get_item("potion_health")] if "potion_health" in items else []
    manager = ConversationManager(
        store, items, sink, ConsoleMenu(),
        lambda npc, p: DemoTrading(npc, p, sink, shelf),
    )

    sink.offer(f"NPCs here: {', '.join(npcs.get_npc(i).name for i in npcs.ids())}")
    sink.offer("Type 'talk <name>' or 'quit'.")
    sys.exit(run_repl(npcs, manager, player, sink))


def run_repl(npcs: NpcRepository, manager: ConversationManager, player: DemoPlayer,
             sink: MessageSink, read=input) -> int:
    """Read commands until quit or end of input. Returns the process exit code."""
    while True:
        try:
            line = read("> ").strip()
        except EOFError:
            return 0
        command, _, arg = line.partition(" ")
        if command in ("quit", "q"):
            return 0
        if command in ("talk", "t", "speakto"):
            try:
                command_talk(arg.strip(), npcs, manager, player, sink)
            except DeathError as e:
                logger.info("player died: %s", e)
                sink.offer("You died.")
                return 1
            except EOFError:
                # input closed while a conversation menu was waiting
                return 0
        elif command:
            sink.offer(f"Unknown command {command!r}")


if __name__ == "__main__":
    main()
