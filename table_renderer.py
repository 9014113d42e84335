import re

from screen_output import display_width
from table_store import Cell, Header, Row


_CONTROL = re.compile(r"[\x00-\x1f\x7f-\x9f]")


class TableRenderer:
    """Paints every table in the store and mirrors each span into a hit canvas.

    Layout, per table: a blank line, the header line, one line per row, and a
    trailing blank line. Each header or cell is written as ``text, `` and
    wrapped in brackets when it is marked.
    """

    SEPARATOR = ", "

    def __init__(self, origin=(0, 0)):
        self.origin = origin
        self.col = 0
        self.row = 0

    @classmethod
    def format_span(cls, text, marked):
        # a span always stays on one screen line
        text = _CONTROL.sub(" ", text)
        if marked:
            return f"[{text}]{cls.SEPARATOR}"
        return f"{text}{cls.SEPARATOR}"

    def render(self, store, canvas, output):
        canvas.clear()
        self.col, self.row = self.origin
        output.move_cursor(self.col, self.row)

        for table in store.tables():
            self._line_break(output)

            for h in table.headers:
                header = store.get(h, Header)
                self._emit(output, canvas, h, self.format_span(header.text, header.selected))
            self._line_break(output)

            for r in table.rows:
                row = store.get(r, Row)
                for c in row.cells:
                    cell = store.get(c, Cell)
                    marked = cell.selected or cell.pressed
                    self._emit(output, canvas, c, self.format_span(cell.text, marked))
                self._line_break(output)

            self._line_break(output)

    def _emit(self, output, canvas, entity, text):
        width = display_width(text)
        canvas.paint(entity, self.col, self.row, width)
        output.move_cursor(self.col, self.row)
        output.write_text(text)
        self.col += width

    def _line_break(self, output):
        self.col = self.origin[0]
        self.row += 1
        output.move_cursor(self.col, self.row)
