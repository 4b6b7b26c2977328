"""Player choice providers.

A `ChoiceProvider` is handed the prompts of the currently selectable lines and
returns the index of the one the player picked, or None when there is nothing
to pick from.

    ConsoleMenu      — numbered menu on stdin/stdout, re-asks on bad input
    ScriptedChoices  — replays pre-recorded answers; used by tests and demos
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol


class ChoiceProvider(Protocol):
    def choose(self, prompts: list[str]) -> int | None: ...


class ConsoleMenu:
    """Prints the options as a numbered list and reads until one is valid.

    The player may type the option number or the option text itself
    (case-insensitive).
    """

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._read = read
        self._write = write

    def choose(self, prompts: list[str]) -> int | None:
        if not prompts:
            return None
        for number, prompt in enumerate(prompts, start=1):
            self._write(f"[{number}] {prompt}")
        while True:
            picked = _resolve(self._read("> ").strip(), prompts)
            if picked is not None:
                return picked
            self._write("Please choose one of the options above.")


def _resolve(answer: str, prompts: list[str]) -> int | None:
    if answer.isdigit():
        number = int(answer)
        return number - 1 if 1 <= number <= len(prompts) else None
    lowered = answer.lower()
    for i, prompt in enumerate(prompts):
        if prompt.lower() == lowered:
            return i
    return None


class ScriptedChoices:
    """Answers with pre-recorded picks, matched by prompt text.

    Every offered list is kept in `offered` so tests can check what the player
    saw. Raises LookupError if a scripted answer is not among the options or the
    script runs out while options remain.
    """

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self._answers = list(answers)
        self.offered: list[list[str]] = []

    def choose(self, prompts: list[str]) -> int | None:
        self.offered.append(list(prompts))
        if not prompts:
            return None
        if not self._answers:
            raise LookupError(f"No scripted answer left for options {prompts!r}")
        answer = self._answers.pop(0)
        if answer not in prompts:
            raise LookupError(f"Scripted answer {answer!r} not in {prompts!r}")
        return prompts.index(answer)
