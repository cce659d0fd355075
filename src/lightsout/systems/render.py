from esper import World

from lightsout.components.game_session import InputMode
from lightsout.rendering.primitives import draw_right_text, draw_text, fill_rect, hollow_rect
from lightsout.rendering.surface import Color, RenderSurface
from lightsout.ui.layout import cell_to_rect
from lightsout.utils.coordinates import format_cell_label
from lightsout.utils.session import get_board, get_layout, get_session

LIGHT_COLOR = Color.YELLOW
OUTLINE_COLOR = Color.WHITE
LABEL_COLOR = Color.CYAN


class RenderSystem:
    """Draws the session onto a render surface once per frame."""

    def __init__(self, world: World, surface: RenderSurface):
        self.world = world
        self.surface = surface
        self.frames = 0

    def process(self):
        self.surface.clear()
        self._draw_hud()
        self._draw_table()
        self._draw_status()
        self.surface.present()
        self.frames += 1

    def _draw_hud(self):
        session = get_session(self.world)
        keyboard = session.input_mode == InputMode.KEYBOARD
        if session.has_won:
            reset_hint = "Type ':r' to reset." if keyboard else "Press 'r' to reset."
            text = f"You won with {session.moves} moves! {reset_hint}"
        else:
            text = f"Moves: {session.moves}"
        draw_text(self.surface, 0, 0, text, Color.WHITE, bold=True)
        quit_hint = "Type ':q' to quit." if keyboard else "Press 'q' to quit."
        draw_right_text(self.surface, 0, quit_hint, Color.WHITE)

    def _draw_table(self):
        board = get_board(self.world)
        layout = get_layout(self.world)
        keyboard = get_session(self.world).input_mode == InputMode.KEYBOARD
        # Outlines first so lit interiors are drawn over them.
        for row in range(board.size):
            for col in range(board.size):
                x, y, w, h = cell_to_rect(layout, row, col)
                if w < 0 or h < 0:
                    continue
                hollow_rect(self.surface, x, y, w, h, OUTLINE_COLOR)
        for row in range(board.size):
            for col in range(board.size):
                x, y, w, h = cell_to_rect(layout, row, col)
                if w < 0 or h < 0:
                    continue
                lit = board.is_lit(row, col)
                if lit:
                    fill_rect(self.surface, x + 2, y + 1, w - 3, h - 1, LIGHT_COLOR)
                if keyboard and w > 1 and h > 1:
                    label = format_cell_label(row, col)[:w - 1]
                    if lit:
                        draw_text(self.surface, x + 1, y + 1, label, Color.BLACK, LIGHT_COLOR)
                    else:
                        draw_text(self.surface, x + 1, y + 1, label, LABEL_COLOR)

    def _draw_status(self):
        session = get_session(self.world)
        height = self.surface.height()
        if session.input_mode == InputMode.KEYBOARD:
            mode_line = f"[keyboard] > {session.buffer_text}"
        else:
            mode_line = "[mouse] k: keyboard  r: reset"
        draw_text(self.surface, 0, height - 2, mode_line, Color.GREEN)
        if session.message:
            draw_text(self.surface, 0, height - 1, session.message, Color.WHITE)
