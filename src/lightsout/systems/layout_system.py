import logging

from esper import World

from lightsout.events.bus import EVENT_LAYOUT_CHANGED, EVENT_RESIZE, EventBus
from lightsout.ui.layout import compute_layout
from lightsout.utils.session import get_board, replace_layout

logger = logging.getLogger(__name__)


class LayoutSystem:
    """Recomputes the table layout whenever the terminal is resized."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_RESIZE, self.on_resize)

    def on_resize(self, sender, **kwargs):
        width = kwargs.get('width')
        height = kwargs.get('height')
        if width is None or height is None:
            return
        try:
            width_int = int(width)
            height_int = int(height)
        except (TypeError, ValueError):
            return
        self.notify_resize(width_int, height_int)

    def notify_resize(self, width: int, height: int):
        layout = compute_layout(width, height, get_board(self.world).size)
        replace_layout(self.world, layout)
        logger.debug("Layout recomputed for %dx%d terminal: %s", width, height, layout)
        self.event_bus.emit(EVENT_LAYOUT_CHANGED, width=width, height=height, layout=layout)
