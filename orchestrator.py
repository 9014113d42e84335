# ~/Apps/ecstable/orchestrator.py
import logging

from gesture_dispatcher import GestureDispatcher
from hit_canvas import HitCanvas
from screen_output import ScreenOutput
from table_renderer import TableRenderer
from terminal_events import read_event


logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, stdscr, app_state, config=None, output=None, event_source=None):
        self.stdscr = stdscr
        self.state = app_state
        self.config = config or {}

        self.output = output if output is not None else ScreenOutput(stdscr)
        self._read_event = event_source or (lambda: read_event(self.stdscr))

        # ---- hit canvas ----
        self.canvas = HitCanvas()
        self.canvas.resize(*self.output.size())

        self.renderer = TableRenderer()
        self.dispatcher = GestureDispatcher(
            app_state.store, self.canvas, quit_key=self.config.get("QUIT_KEY", "q")
        )
        self.debug_canvas = bool(self.config.get("DEBUG_CANVAS", False))
        self.exit_requested = False

    # ---------------- UI ----------------

    def redraw(self):
        self.output.clear_screen()
        self.output.move_cursor(0, 0)
        self.renderer.render(self.state.store, self.canvas, self.output)
        if self.debug_canvas:
            logger.debug("Canvas after render:\n%s", self.canvas.dump())
        self.output.flush()

    # ---------------- main loop ----------------

    def run(self):
        self.redraw()

        while not self.exit_requested:
            event = self._read_event()
            result = self.dispatcher.handle(event)

            if result == "quit":
                self.exit_requested = True
                continue

            if result == "resize":
                logger.debug("Resize to %dx%d", event.width, event.height)
                self.canvas.resize(event.width, event.height)
                self.redraw()
            elif result == "redraw":
                self.redraw()
