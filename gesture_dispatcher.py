import logging

from table_store import Cell
from terminal_events import KeyEvent, MouseEvent, ResizeEvent


logger = logging.getLogger(__name__)

LEFT_BUTTON = 1


class GestureDispatcher:
    """Press/release state machine that turns a drag into a row-local swap.

    ``handle`` returns what the outer loop should do next: ``None``,
    ``"redraw"``, ``"resize"`` or ``"quit"``. Only button-down and button-up
    are inspected, so the drop target is wherever the button was released.
    """

    def __init__(self, store, canvas, quit_key="q"):
        self.store = store
        self.canvas = canvas
        self.quit_key = quit_key

        self.mode = "idle"  # idle | pressed
        self.pressed_cell = None
        self.pressed_row = None

    # ---------- helpers ----------
    def _cell_at(self, col, row):
        handle = self.canvas.lookup(col, row)
        if handle is None:
            return None
        # the canvas may outlive what it points at
        return self.store.find(handle, Cell)

    def _abandon(self):
        if self.pressed_cell is not None:
            cell = self.store.find(self.pressed_cell, Cell)
            if cell is not None:
                cell.pressed = False
        self.mode = "idle"
        self.pressed_cell = None
        self.pressed_row = None

    # ---------- events ----------
    def handle(self, event):
        if isinstance(event, ResizeEvent):
            if self.mode == "pressed":
                logger.debug("Resize abandoned gesture on cell %s", self.pressed_cell)
            self._abandon()
            return "resize"

        if isinstance(event, KeyEvent):
            if event.key == self.quit_key and not event.modifiers:
                self._abandon()
                self.store.clear_transient_markers()
                return "quit"
            return None

        if isinstance(event, MouseEvent) and event.button == LEFT_BUTTON:
            if event.kind == "down":
                return self._on_press(event)
            if event.kind == "up":
                return self._on_release(event)
        return None

    def _on_press(self, event):
        redraw = None
        if self.mode == "pressed":
            # the matching release never arrived
            self._abandon()
            redraw = "redraw"

        cell = self._cell_at(event.col, event.row)
        logger.debug(
            "Pressed at (%d, %d) on %s",
            event.col,
            event.row,
            cell.handle if cell is not None else None,
        )
        if cell is None:
            return redraw

        cell.pressed = True
        self.mode = "pressed"
        self.pressed_cell = cell.handle
        self.pressed_row = cell.row
        return "redraw"

    def _on_release(self, event):
        if self.mode != "pressed":
            return None

        source = self.store.find(self.pressed_cell, Cell)
        target = self._cell_at(event.col, event.row)
        logger.debug(
            "Released at (%d, %d) on %s",
            event.col,
            event.row,
            target.handle if target is not None else None,
        )

        if source is not None and target is not None:
            target.released = True
            if target.row == self.pressed_row and source.row == self.pressed_row:
                self.store.swap_cells_in_row(
                    self.pressed_row,
                    self.store.index_in_row(source.handle),
                    self.store.index_in_row(target.handle),
                )
            target.released = False

        self._abandon()
        return "redraw"
