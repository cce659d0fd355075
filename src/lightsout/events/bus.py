from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep handlers alive for systems nobody stores in a variable.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# TERMINAL & RAW INPUT
# ============================================================================
EVENT_RESIZE = "resize"                    # payload: width=int, height=int
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_MOUSE_RELEASE = "mouse_release"      # payload: x, y, button
EVENT_KEY_CHAR = "key_char"                # payload: char=str


# ============================================================================
# BOARD
# ============================================================================
EVENT_CELL_PRESS = "cell_press"            # payload: row, col, source=str
EVENT_BOARD_CHANGED = "board_changed"      # payload: reason=str, positions=list[(r,c)]
EVENT_PUZZLE_SOLVED = "puzzle_solved"      # payload: moves=int


# ============================================================================
# SESSION & FLOW
# ============================================================================
EVENT_RESET_REQUEST = "reset_request"                  # payload: source=str
EVENT_SESSION_RESET = "session_reset"                  # payload: presses=int
EVENT_QUIT_REQUEST = "quit_request"                    # payload: source=str
EVENT_INPUT_MODE_CHANGED = "input_mode_changed"        # payload: previous_mode=InputMode, new_mode=InputMode
EVENT_INPUT_MODE_REJECTED = "input_mode_rejected"      # payload: requested_mode=InputMode, reason=str
EVENT_LAYOUT_CHANGED = "layout_changed"                # payload: width=int, height=int, layout=LayoutInfo
