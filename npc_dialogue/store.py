"""Dialogue store — every NPC's dialogue graph, loaded once at startup.

The source document has the same shape as `npcs.json`:

    {"npcs": {"<npc id>": {"conversations": [<line>, ...], ...}, ...}}

NPCs without a `conversations` array get no graph. A malformed conversation
never yields a partial graph: with `strict=True` the whole load fails, otherwise
the error is logged and that NPC is left out.

The store is built explicitly and passed to whatever starts conversations;
there is no module-level instance.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from npc_dialogue.graph import DialogueDataError, DialogueGraph, build_graph
from npc_dialogue.models import Npc, NpcDocument, NpcEntry

logger = logging.getLogger(__name__)


class DialogueStore(Mapping[str, DialogueGraph]):
    """Read-only mapping of NPC id → DialogueGraph."""

    def __init__(self, graphs: Mapping[str, DialogueGraph]) -> None:
        self._graphs = dict(graphs)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, source: Mapping[str, Any], *, strict: bool = False) -> DialogueStore:
        try:
            document = NpcDocument.model_validate(source)
        except ValidationError as e:
            raise DialogueDataError(f"Malformed NPC document: {e}") from e

        graphs: dict[str, DialogueGraph] = {}
        skipped = 0
        for npc_id, raw in document.npcs.items():
            try:
                entry = _validate_entry(raw)
                if entry.conversations is None:
                    continue
                graphs[npc_id] = build_graph(npc_id, entry.conversations)
            except DialogueDataError as e:
                if strict:
                    raise DialogueDataError(f"NPC {npc_id!r}: {e}") from e
                logger.error("Skipping conversation for NPC %r: %s", npc_id, e)
                skipped += 1

        logger.info(
            "Loaded %d dialogue graphs (%d skipped)", len(graphs), skipped
        )
        return cls(graphs)

    @classmethod
    def from_file(cls, path: Path, *, strict: bool = False) -> DialogueStore:
        try:
            source = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise DialogueDataError(f"{path} is not valid JSON: {e}") from e
        return cls.load(source, strict=strict)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def __getitem__(self, npc_id: str) -> DialogueGraph:
        return self._graphs[npc_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._graphs)

    def __len__(self) -> int:
        return len(self._graphs)

    def graph_for(self, npc: Npc) -> DialogueGraph | None:
        return self._graphs.get(npc.id)


def _validate_entry(raw: Any) -> NpcEntry:
    try:
        return NpcEntry.model_validate(raw)
    except ValidationError as e:
        raise DialogueDataError(f"Malformed NPC entry: {e}") from e
