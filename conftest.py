import shutil
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from npc_dialogue.collaborators import DeathError, QueueSink
from npc_dialogue.demo import create_demo_data
from npc_dialogue.models import Item, Npc
from npc_dialogue.repository import ItemRepository

TEST_DATA_DIR = Path("data-tests")


@pytest.fixture(autouse=True)
def clean_test_data(monkeypatch):
    """Wipe and re-create data-tests/ with demo data before every test."""
    for var in ("NPC_DIALOGUE_DATA_DIR", "NPC_DIALOGUE_STRICT_LOAD", "NPC_DIALOGUE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    create_demo_data(TEST_DATA_DIR)
    yield
    # leave data-tests around after tests for inspection; CI can ignore it


class FakePlayer:
    """Player double: plain stats, inventory of item ids, recorded attacks."""

    def __init__(self, character_type="Recruit", level=1, inventory=(), dies=False):
        self.name = "tester"
        self.current_character_type = character_type
        self.level = level
        self.health = 10
        self.health_max = 10
        self.inventory = list(inventory)
        self.dies = dies
        self.attacked: list[str] = []

    def has_item(self, item: Item) -> bool:
        return item.id in self.inventory

    def attack(self, target_name: str) -> None:
        self.attacked.append(target_name)
        if self.dies:
            raise DeathError(f"{self.name} was killed by {target_name}")


@pytest.fixture
def sink() -> QueueSink:
    return QueueSink()


@pytest.fixture
def items() -> ItemRepository:
    return ItemRepository.from_data({
        "potion_health": {"name": "Health Potion"},
        "wmac1": {"name": "Mace"},
    })


@pytest.fixture
def npc() -> Npc:
    return Npc(id="recruiter", name="Recruiter",
               allies=frozenset({"Recruit"}), enemies=frozenset({"Brotherhood Member"}))


@pytest.fixture
def make_player():
    return FakePlayer


@pytest.fixture
def player() -> FakePlayer:
    return FakePlayer()


@pytest.fixture
def trading() -> MagicMock:
    """Trading factory mock; `trading.return_value.trade` records sessions."""
    return MagicMock(name="trading")
