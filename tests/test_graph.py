"""Tests for npc_dialogue.graph — tag parsing and graph building."""

import pytest

from npc_dialogue.graph import (
    ActionKind,
    Condition,
    ConditionKind,
    DialogueDataError,
    build_graph,
    parse_action,
)


def _line(player="", text="x", condition="none", action="none", response=None):
    line = {"player": player, "text": text, "condition": condition, "action": action}
    if response is not None:
        line["response"] = response
    return line


# ── Condition tokens ────────────────────────────────────────


class TestConditionParse:
    def test_none(self) -> None:
        assert Condition.parse("none") == Condition(ConditionKind.NONE, "")

    def test_kind_without_parameter(self) -> None:
        assert Condition.parse("ally") == Condition(ConditionKind.ALLY, "")
        assert Condition.parse("enemy") == Condition(ConditionKind.ENEMY, "")

    def test_level(self) -> None:
        assert Condition.parse("level=5") == Condition(ConditionKind.LEVEL, "5")

    def test_item(self) -> None:
        assert Condition.parse("item=potion_health") == Condition(ConditionKind.ITEM, "potion_health")

    def test_parameter_is_everything_after_first_equals(self) -> None:
        assert Condition.parse("item=a=b") == Condition(ConditionKind.ITEM, "a=b")

    def test_char_type_token_has_space(self) -> None:
        assert Condition.parse("char type=Recruit") == Condition(ConditionKind.CHAR_TYPE, "Recruit")

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(DialogueDataError):
            Condition.parse("mood=happy")

    def test_non_integer_level_rejected(self) -> None:
        with pytest.raises(DialogueDataError):
            Condition.parse("level=high")


class TestParseAction:
    @pytest.mark.parametrize("token,kind", [
        ("none", ActionKind.NONE),
        ("attack", ActionKind.ATTACK),
        ("buy", ActionKind.BUY),
        ("sell", ActionKind.SELL),
        ("trade", ActionKind.TRADE),
        ("give", ActionKind.GIVE),
        ("take", ActionKind.TAKE),
    ])
    def test_known_tags(self, token, kind) -> None:
        assert parse_action(token) is kind

    def test_tags_are_lower_case(self) -> None:
        with pytest.raises(DialogueDataError):
            parse_action("ATTACK")


# ── build_graph ─────────────────────────────────────────────


class TestBuildGraph:
    def test_list_position_is_index(self) -> None:
        graph = build_graph("guide", [
            _line(text="Hello", response=[1]),
            _line(player="Bye", text="Farewell"),
        ])
        assert [n.index for n in graph] == [0, 1]
        assert graph.node(0).outgoing == (1,)
        assert graph.node(1).outgoing == ()
        assert graph.node(1).player_prompt == "Bye"

    def test_entry_candidates_in_authored_order(self) -> None:
        graph = build_graph("npc", [
            _line(player="Hi", text="a"),
            _line(text="b", condition="ally"),
            _line(text="c"),
        ])
        assert [n.text for n in graph.entry_candidates()] == ["b", "c"]

    def test_targets_follow_edge_order(self) -> None:
        graph = build_graph("npc", [
            _line(response=[2, 1]),
            _line(player="one", text="1"),
            _line(player="two", text="2"),
        ])
        assert [n.text for n in graph.targets(graph.node(0))] == ["2", "1"]

    def test_missing_field_is_load_error(self) -> None:
        with pytest.raises(DialogueDataError, match="Line 1"):
            build_graph("npc", [_line(), {"player": "x", "text": "y", "condition": "none"}])

    def test_unknown_action_is_load_error(self) -> None:
        with pytest.raises(DialogueDataError, match="Line 0"):
            build_graph("npc", [_line(action="dance")])

    def test_dangling_edge_is_load_error(self) -> None:
        with pytest.raises(DialogueDataError, match="missing line 3"):
            build_graph("npc", [_line(response=[3])])

    def test_nodes_are_immutable(self) -> None:
        graph = build_graph("npc", [_line()])
        with pytest.raises(AttributeError):
            graph.node(0).text = "changed"

    def test_empty_conversation(self) -> None:
        graph = build_graph("npc", [])
        assert len(graph) == 0
        assert graph.entry_candidates() == []
