"""Tests for npc_dialogue.repository."""

import json
from pathlib import Path

import pytest

from npc_dialogue.repository import ItemRepository, NpcRepository, RepositoryError

TEST_DATA_DIR = Path("data-tests")


# ── NpcRepository ───────────────────────────────────────────


def test_npcs_from_demo_file():
    repo = NpcRepository.from_file(TEST_DATA_DIR / "npcs.json")
    assert set(repo.ids()) == {"recruiter", "guide", "sewer_rat"}
    recruiter = repo.get_npc("recruiter")
    assert recruiter.name == "Recruiter"
    assert "Recruit" in recruiter.allies
    assert "Brotherhood Member" in recruiter.enemies


def test_unknown_npc():
    repo = NpcRepository.from_data({})
    with pytest.raises(RepositoryError):
        repo.get_npc("ghost")


def test_npc_without_name_rejected():
    with pytest.raises(RepositoryError, match="nameless"):
        NpcRepository.from_data({"nameless": {"allies": []}})


def test_find_by_name_ignores_case():
    repo = NpcRepository.from_data({"rat": {"name": "Sewer Rat"}})
    assert repo.find_by_name("sewer rat").id == "rat"
    assert repo.find_by_name("Rat") is None


def test_npcs_file_without_npcs_object(tmp_path):
    path = tmp_path / "npcs.json"
    path.write_text(json.dumps({"items": {}}))
    with pytest.raises(RepositoryError):
        NpcRepository.from_file(path)


# ── ItemRepository ──────────────────────────────────────────


def test_items_from_demo_file():
    repo = ItemRepository.from_file(TEST_DATA_DIR / "items.json")
    assert len(repo) == 2
    assert "potion_health" in repo
    assert repo.get_item("wmac1").name == "Mace"


def test_unknown_item():
    with pytest.raises(RepositoryError):
        ItemRepository.from_data({}).get_item("dragon_egg")
