from lightsout.rendering.surface import Color, RenderSurface


def fill_rect(surface: RenderSurface, x: int, y: int, w: int, h: int, color: Color) -> None:
    for i in range(x, x + w):
        for j in range(y, y + h):
            surface.put(i, j, ' ', Color.BLACK, color)


def hollow_rect(surface: RenderSurface, x: int, y: int, w: int, h: int, color: Color) -> None:
    # corners
    surface.put(x, y, '┌', color, Color.BLACK)
    surface.put(x + w, y, '┐', color, Color.BLACK)
    surface.put(x, y + h, '└', color, Color.BLACK)
    surface.put(x + w, y + h, '┘', color, Color.BLACK)
    # sides
    for i in range(x + 1, x + w):
        surface.put(i, y, '─', color, Color.BLACK)
        surface.put(i, y + h, '─', color, Color.BLACK)
    for j in range(y + 1, y + h):
        surface.put(x, j, '│', color, Color.BLACK)
        surface.put(x + w, j, '│', color, Color.BLACK)


def draw_text(surface: RenderSurface, x: int, y: int, text: str, fg: Color,
              bg: Color = Color.BLACK, bold: bool = False) -> None:
    for offset, ch in enumerate(text):
        surface.put(x + offset, y, ch, fg, bg, bold)


def draw_right_text(surface: RenderSurface, y: int, text: str, fg: Color, bold: bool = False) -> None:
    draw_text(surface, surface.width() - len(text), y, text, fg, bold=bold)
