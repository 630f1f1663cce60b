"""
Tests for replay determinism and replay-level properties.

Critical: Replay must produce identical snapshots across multiple runs.
"""

from pathlib import Path

import pytest

from rootreplay.core.canonical import canonical_json_str, state_hash
from rootreplay.core.errors import LayoutMismatchError, RegionIndexError
from rootreplay.core.raw import GameLog, RawGainVP, RawMove, RawThing, RawUnknown, Turn
from rootreplay.formatter import PLACEHOLDER_PREFIX
from rootreplay.log import game_from_dict, load_game
from rootreplay.reference import forests
from rootreplay.replay import flatten_turns, initialize, replay

FIXTURE = Path(__file__).parent / "fixtures" / "game_small.json"


def test_replay_determinism_100_runs():
    """Replay same game 100 times must produce identical snapshots."""
    game = load_game(FIXTURE)

    hashes = set()
    for _ in range(100):
        steps = replay(game)
        hashes.add(tuple(state_hash(s.state) for s in steps))

    assert len(hashes) == 1


def test_replay_twice_is_deeply_equal():
    game = load_game(FIXTURE)
    assert replay(game) == replay(game)


def test_one_snapshot_per_action():
    game = load_game(FIXTURE)
    steps = replay(game)

    assert len(steps) == len(flatten_turns(game)) == 9


def test_fixture_final_state():
    steps = replay(load_game(FIXTURE))
    final = steps[-1].state

    assert final.faction_scores == {"C": 1, "E": 0}
    assert final.regions[3].warriors == {"C": 0, "E": 0}
    assert final.regions[3].buildings == {"c_s": 1}
    assert final.regions[7].warriors == {"C": 0, "E": 3}
    assert final.sub_areas["1_5_10_11"].warriors == {"C": 1}
    assert final.crafted_counts == {"s": 1}
    assert steps[-1].action.description == f"{PLACEHOLDER_PREFIX} garbage"


def test_snapshots_are_not_shared():
    steps = replay(load_game(FIXTURE))
    first = canonical_json_str(steps[0].state)

    steps[-1].state.regions[3].warriors["C"] = 99

    assert canonical_json_str(steps[0].state) == first
    assert steps[0].state.regions[3].warriors["C"] == 2


def test_turn_boundaries():
    game = load_game(FIXTURE)
    steps = replay(game)

    boundaries = [(i, s.action.turn_boundary) for i, s in enumerate(steps) if s.action.turn_boundary]
    assert boundaries == [(0, "C"), (3, "E"), (6, "C")]
    assert [s.action.acting_party for s in steps] == ["C"] * 3 + ["E"] * 3 + ["C"] * 3


def test_initial_state_is_empty():
    game = load_game(FIXTURE)
    s0 = initialize(game)

    assert s0.faction_scores == {"C": 0, "E": 0}
    assert len(s0.regions) == 13
    assert all(r.warriors == {"C": 0, "E": 0} and not r.buildings and not r.tokens for r in s0.regions)
    assert set(s0.sub_areas) == set(forests("Fall"))
    assert all(not a.warriors and not a.buildings and not a.tokens for a in s0.sub_areas.values())
    assert s0.crafted_counts == {}


def test_initialize_unknown_layout():
    with pytest.raises(LayoutMismatchError):
        initialize(GameLog(map="Moon", players={"C": "a"}))


def test_single_vp_scenario():
    game = GameLog(map="Fall", players={"A": "x"}, turns=(Turn(taker="A", actions=(RawGainVP(faction="A", vp=3),)),))
    steps = replay(game)

    assert len(steps) == 1
    assert steps[0].state.faction_scores["A"] == 3
    assert steps[0].action.turn_boundary == "A"
    assert all(r.warriors["A"] == 0 for r in steps[0].state.regions)


def test_warrior_from_supply_scenario():
    thing = RawThing(number=2, faction="A", piece_type="w", destination=3)
    game = GameLog(map="Fall", players={"A": "x"}, turns=(Turn(taker="A", actions=(RawMove(things=(thing,)),)),))
    state = replay(game)[0].state
    s0 = initialize(game)

    assert state.regions[3].warriors["A"] == 2
    assert [r for i, r in enumerate(state.regions) if i != 3] == [r for i, r in enumerate(s0.regions) if i != 3]


def test_unrecognized_actions_do_not_abort():
    game = GameLog(map="Fall", players={"C": "x"}, turns=(Turn(taker="C", actions=(RawUnknown(raw="?"), RawUnknown())),))
    steps = replay(game)

    assert len(steps) == 2
    assert steps[1].state == initialize(game)


def test_flip_plot_without_clearing_leaves_burrow_alone():
    game = game_from_dict({
        "map": "Fall",
        "players": {"P": "x"},
        "turns": [{"taker": "P", "actions": [{"type": "FlipPlot", "plot": "b"}]}],
    })
    steps = replay(game)

    assert steps[0].state.regions[0].tokens == {}
    assert steps[0].state == initialize(game)


def test_bad_count_keeps_sibling_moves():
    things = [
        {"number": "two", "thing": {"faction": "C", "pieceType": "w"}, "destination": 3},
        {"number": 1, "thing": {"faction": "C", "pieceType": "w"}, "destination": 4},
    ]
    game = game_from_dict({
        "map": "Fall",
        "players": {"C": "x"},
        "turns": [{"taker": "C", "actions": [{"type": "Move", "things": things}]}],
    })
    state = replay(game)[0].state

    assert state.regions[3].warriors["C"] == 0
    assert state.regions[4].warriors["C"] == 1


def test_empty_log():
    assert replay(None) == []
    assert replay(GameLog(map="Fall")) == []


def test_layout_mismatch_is_fatal():
    thing = RawThing(number=1, faction="C", piece_type="w", destination=40)
    game = GameLog(map="Fall", players={"C": "x"}, turns=(Turn(taker="C", actions=(RawMove(things=(thing,)),)),))

    with pytest.raises(RegionIndexError):
        replay(game)
