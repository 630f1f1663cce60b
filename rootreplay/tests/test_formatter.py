"""
Tests for the action formatter.
"""

from rootreplay.core.actions import CraftEvent, Movement, PieceKind, ScoreDelta
from rootreplay.core.raw import (
    FactionBoard,
    Forest,
    RawClearPath,
    RawCombat,
    RawCraft,
    RawFlipPlot,
    RawGainVP,
    RawMove,
    RawReveal,
    RawSetOutcast,
    RawSetPrices,
    RawSwapPlots,
    RawThing,
    RawUnknown,
)
from rootreplay.formatter import PLACEHOLDER_PREFIX, format_action


def warriors(number=2, faction="C", start=None, destination=None):
    return RawThing(number=number, faction=faction, piece_type="w", start=start, destination=destination)


def test_unknown_action_keeps_placeholder():
    act = format_action(RawUnknown(raw="X?!"), "C")

    assert act.description == f"{PLACEHOLDER_PREFIX} X?!"
    assert act.acting_party == "C"
    assert act.turn_boundary is None
    assert act.score_delta is None
    assert act.craft_event is None
    assert act.movements == ()


def test_placeholder_without_raw_text():
    act = format_action(RawUnknown(), "E")
    assert act.description == f"{PLACEHOLDER_PREFIX} [no raw]"


def test_gain_vp_sets_score_delta():
    act = format_action(RawGainVP(faction="C", vp=3), "C")

    assert act.score_delta == ScoreDelta(faction="C", amount=3)
    assert act.description == "Marquise de Cat gains 3 VP"
    assert act.movements == ()


def test_combat_is_description_only():
    act = format_action(RawCombat(attacker="E", defender="A", clearing=4), "E")

    assert act.description == "Eyrie Dynasties attacks Woodland Alliance in clearing 4"
    assert act.score_delta is None
    assert act.movements == ()


def test_craft_item_sets_craft_event():
    act = format_action(RawCraft(craft_item="s"), "C")

    assert act.craft_event == CraftEvent(item_key="s")
    assert act.description == "Crafts Sword"


def test_craft_card_has_no_delta():
    act = format_action(RawCraft(craft_card="Favor of the Mice"), "C")

    assert act.craft_event is None
    assert act.description == "Crafts Favor of the Mice"


def test_move_from_supply_to_clearing():
    act = format_action(RawMove(things=(warriors(destination=3),)), "C")

    assert act.movements == (
        Movement(quantity=2, faction="C", piece_kind=PieceKind.WARRIOR, piece_key="w", destination=3),
    )
    assert act.description == "Moves 2 Marquise warrior(s) from supply to clearing 3"


def test_move_building_description_uses_piece_name():
    thing = RawThing(number=1, faction="C", piece_type="b", piece="s", destination=5)
    act = format_action(RawMove(things=(thing,)), "C")

    assert act.movements[0].piece_kind == PieceKind.BUILDING
    assert act.movements[0].formatted_piece == "c_s"
    assert act.description == "Moves 1 Marquise Sawmill from supply to clearing 5"


def test_move_to_forest_uses_sorted_key():
    act = format_action(RawMove(things=(warriors(number=1, start=3, destination=Forest((11, 10, 5, 1))),)), "C")

    move = act.movements[0]
    assert move.source == 3
    assert move.destination is None
    assert move.destination_sub_area == "1_5_10_11"
    assert act.description == "Moves 1 Marquise warrior(s) from clearing 3 to forest 1_5_10_11"


def test_move_from_faction_board():
    act = format_action(RawMove(things=(warriors(start=FactionBoard("O"), destination=2),)), "O")

    assert act.movements[0].source == FactionBoard("O")
    assert act.description == "Moves 2 Marquise warrior(s) from board Riverfolk to clearing 2"


def test_numeric_string_location_is_a_region():
    act = format_action(RawMove(things=(warriors(destination="7"),)), "C")
    assert act.movements[0].destination == 7


def test_malformed_destination_is_dropped():
    act = format_action(RawMove(raw="w->abc", things=(warriors(destination="abc"),)), "C")

    assert act.movements == ()
    assert act.description == f"{PLACEHOLDER_PREFIX} w->abc"


def test_malformed_thing_does_not_drop_siblings():
    things = (warriors(destination="abc"), warriors(number=1, destination=4))
    act = format_action(RawMove(things=things), "C")

    assert len(act.movements) == 1
    assert act.movements[0].destination == 4
    assert act.description == "Moves 1 Marquise warrior(s) from supply to clearing 4"


def test_unreadable_count_is_skipped():
    things = (warriors(number=None, destination=3), warriors(number=1, destination=4))
    act = format_action(RawMove(things=things), "C")

    assert len(act.movements) == 1
    assert act.movements[0].destination == 4


def test_unparsed_forest_is_malformed():
    act = format_action(RawMove(raw="w->?", things=(warriors(destination="{'clearings': ['x', 2]}"),)), "C")

    assert act.movements == ()
    assert act.description == f"{PLACEHOLDER_PREFIX} w->?"


def test_rafts_and_non_pieces_are_skipped():
    raft = RawThing(number=1, faction="O", piece_type="r", destination=3)
    card = RawThing(number=1, destination=3)
    act = format_action(RawMove(raw="raft", things=(raft, card)), "O")

    assert act.movements == ()
    assert act.description.startswith(PLACEHOLDER_PREFIX)


def test_multiple_things_joined():
    things = (warriors(number=1, destination=1), warriors(number=2, faction="E", start=1, destination=2))
    act = format_action(RawMove(things=things), "E")

    assert act.description == (
        "Moves 1 Marquise warrior(s) from supply to clearing 1, "
        "2 Eyrie warrior(s) from clearing 1 to clearing 2"
    )


def test_reveal_dumps_payload():
    act = format_action(RawReveal(payload={"subjects": [1]}), "C")
    assert act.description == 'Reveals {"subjects":[1]}'


def test_clear_path_names_both_clearings():
    act = format_action(RawClearPath(clearings=(2, 9)), "C")
    assert act.description == "Clears path between clearings 2 and 9"


def test_set_outcast_handles_false():
    assert format_action(RawSetOutcast(suit="F", is_hated=False), "L").description == "Sets outcast to Fox"
    assert format_action(RawSetOutcast(suit="B", is_hated=True), "L").description == "Sets hated outcast to Bird"


def test_set_prices_lists_kinds():
    act = format_action(RawSetPrices(price_types=("h", "r"), price=2), "O")
    assert act.description == "Sets prices Hand Card, Riverboats to 2"


def test_flip_plot_synthesizes_token_swap():
    act = format_action(RawFlipPlot(plot="b", clearing=6), "P")

    assert act.description == "Flips plot Bomb in clearing 6"
    assert act.movements == (
        Movement(quantity=1, faction="P", piece_kind=PieceKind.TOKEN, piece_key="t", source=6),
        Movement(quantity=1, faction="P", piece_kind=PieceKind.TOKEN, piece_key="b", destination=6),
    )


def test_flip_plot_appends_after_moved_things():
    thing = RawThing(number=1, faction="P", piece_type="w", start=6)
    act = format_action(RawFlipPlot(plot="s", clearing=6, things=(thing,)), "P")

    assert [m.piece_kind for m in act.movements] == [PieceKind.WARRIOR, PieceKind.TOKEN, PieceKind.TOKEN]
    assert act.description == "Flips plot Snare in clearing 6"


def test_flip_plot_without_clearing_moves_nothing():
    act = format_action(RawFlipPlot(plot="b"), "P")

    assert act.description == "Flips plot Bomb"
    assert act.movements == ()


def test_swap_plots_has_no_delta():
    act = format_action(RawSwapPlots(clearings=(1, 4)), "P")

    assert act.description == "Swaps plots between clearings 1 and 4"
    assert act.movements == ()
