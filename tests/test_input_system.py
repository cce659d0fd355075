from lightsout.components.game_session import InputMode
from lightsout.events.bus import (
    EVENT_CELL_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_RESIZE,
)
from lightsout.systems.board_ops import lit_positions
from lightsout.ui.layout import cell_to_rect
from lightsout.utils.session import get_board, get_layout, get_session
from tests.helpers import EventCapture, make_session


def click(bus, x, y, button=1):
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def release(bus, x=0, y=0, button=1):
    bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)


def test_left_click_on_cell_toggles_board():
    bus, world = make_session()
    cap = EventCapture(bus, EVENT_CELL_PRESS)
    click(bus, 19, 2)
    assert [(p['row'], p['col']) for p in cap.received] == [(0, 0)]
    assert sorted(lit_positions(get_board(world))) == [(0, 0), (0, 1), (1, 0)]
    session = get_session(world)
    assert session.moves == 1
    assert session.mouse_released is False


def test_held_button_does_not_repeat():
    bus, world = make_session()
    click(bus, 19, 2)
    click(bus, 19, 2)
    assert get_session(world).moves == 1
    release(bus)
    assert get_session(world).mouse_released is True
    click(bus, 19, 2)
    assert get_session(world).moves == 2
    assert lit_positions(get_board(world)) == []


def test_click_outside_table_only_closes_latch():
    bus, world = make_session()
    cap = EventCapture(bus, EVENT_CELL_PRESS)
    click(bus, 2, 2)
    assert cap.received == []
    assert lit_positions(get_board(world)) == []
    assert get_session(world).moves == 0
    assert get_session(world).mouse_released is False


def test_click_below_last_block_is_ignored():
    bus, world = make_session()
    cap = EventCapture(bus, EVENT_CELL_PRESS)
    click(bus, 30, 22)
    assert cap.received == []
    assert get_session(world).mouse_released is False


def test_non_left_buttons_are_ignored():
    bus, world = make_session()
    click(bus, 19, 2, button=3)
    assert get_session(world).moves == 0
    assert get_session(world).mouse_released is True


def test_clicks_ignored_in_keyboard_mode():
    bus, world = make_session()
    get_session(world).input_mode = InputMode.KEYBOARD
    click(bus, 19, 2)
    assert get_session(world).moves == 0
    assert get_session(world).mouse_released is True


def test_clicks_ignored_after_win():
    bus, world = make_session()
    get_session(world).has_won = True
    click(bus, 19, 2)
    assert lit_positions(get_board(world)) == []
    assert get_session(world).mouse_released is False


def test_malformed_payload_ignored():
    bus, world = make_session()
    bus.emit(EVENT_MOUSE_PRESS, x=None, y=2, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x="left", y=2, button=1)
    assert get_session(world).moves == 0
    assert get_session(world).mouse_released is True


def test_clicks_follow_resized_layout():
    bus, world = make_session()
    bus.emit(EVENT_RESIZE, width=120, height=40)
    x, y, _, _ = cell_to_rect(get_layout(world), 2, 3)
    click(bus, x + 1, y + 1)
    assert get_board(world).is_lit(2, 3)
    assert get_session(world).moves == 1


def test_click_on_collapsed_layout_is_rejected():
    bus, world = make_session()
    cap = EventCapture(bus, EVENT_CELL_PRESS)
    bus.emit(EVENT_RESIZE, width=80, height=2)
    click(bus, 30, 2)
    assert cap.received == []
    assert get_session(world).moves == 0
    assert get_session(world).mouse_released is False
