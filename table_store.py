import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional


logger = logging.getLogger(__name__)


class InvalidIndex(IndexError):
    """A swap addressed a position that is not a cell of the given row."""


class StaleEntity(LookupError):
    """A handle no longer resolves to a record of the expected kind."""


class RaggedRow(ValueError):
    pass


@dataclass
class Table:
    handle: int
    headers: List[int] = field(default_factory=list)
    rows: List[int] = field(default_factory=list)


@dataclass
class Header:
    handle: int
    text: str
    table: int
    selected: bool = False


@dataclass
class Row:
    handle: int
    table: int
    cells: List[int] = field(default_factory=list)


@dataclass
class Cell:
    handle: int
    text: str
    row: int
    selected: bool = False
    pressed: bool = False
    released: bool = False


class TableStore:
    """Arena of table records addressed by integer handles.

    Handles are indexes into the arena and are never reused. Records only
    hold handles to each other, so anything else (the hit canvas) can keep a
    handle around without owning the record.
    """

    def __init__(self):
        self._records: list = []

    def _push(self, record):
        self._records.append(record)
        return record

    def _next_handle(self) -> int:
        return len(self._records)

    # ---------- building ----------
    def build(self, columns, rows, selected_column: Optional[int] = 1) -> int:
        columns = [str(c) for c in columns]
        rows = [[str(v) for v in r] for r in rows]
        for idx, r in enumerate(rows):
            if len(r) != len(columns):
                raise RaggedRow(
                    f"row {idx} has {len(r)} cells, expected {len(columns)}"
                )

        table = self._push(Table(self._next_handle()))
        for c, text in enumerate(columns):
            header = self._push(Header(self._next_handle(), text, table.handle))
            header.selected = c == selected_column
            table.headers.append(header.handle)

        for values in rows:
            row = self._push(Row(self._next_handle(), table.handle))
            table.rows.append(row.handle)
            for c, text in enumerate(values):
                cell = self._push(Cell(self._next_handle(), text, row.handle))
                cell.selected = c == selected_column
                row.cells.append(cell.handle)

        logger.debug(
            "Built table %d: %d columns, %d rows",
            table.handle,
            len(table.headers),
            len(table.rows),
        )
        return table.handle

    # ---------- lookups ----------
    def find(self, handle, kind=None):
        if not isinstance(handle, int) or handle < 0 or handle >= len(self._records):
            return None
        record = self._records[handle]
        if kind is not None and not isinstance(record, kind):
            return None
        return record

    def get(self, handle, kind=None):
        record = self.find(handle, kind)
        if record is None:
            expected = kind.__name__ if kind is not None else "record"
            raise StaleEntity(f"handle {handle!r} does not resolve to a {expected}")
        return record

    def tables(self) -> Iterator[Table]:
        for record in self._records:
            if isinstance(record, Table):
                yield record

    def header_count(self, table: int) -> int:
        return len(self.get(table, Table).headers)

    def cell_count(self, row: int) -> int:
        return len(self.get(row, Row).cells)

    def header_texts(self, table: int) -> List[str]:
        return [self.get(h, Header).text for h in self.get(table, Table).headers]

    def row_texts(self, row: int) -> List[str]:
        return [self.get(c, Cell).text for c in self.get(row, Row).cells]

    def index_in_row(self, cell: int) -> int:
        record = self.get(cell, Cell)
        row = self.get(record.row, Row)
        try:
            return row.cells.index(cell)
        except ValueError:
            raise StaleEntity(f"cell {cell} is not listed in row {row.handle}")

    # ---------- mutation ----------
    def swap_cells_in_row(self, row: int, index_a: int, index_b: int) -> None:
        record = self.get(row, Row)
        n = len(record.cells)
        for idx in (index_a, index_b):
            if not isinstance(idx, int) or idx < 0 or idx >= n:
                raise InvalidIndex(f"index {idx!r} out of range for row {row} ({n} cells)")

        cell_a = self.get(record.cells[index_a], Cell)
        cell_b = self.get(record.cells[index_b], Cell)
        if cell_a.row != row or cell_b.row != row:
            raise InvalidIndex(f"cells at {index_a}, {index_b} are not both children of row {row}")

        if index_a == index_b:
            return
        record.cells[index_a], record.cells[index_b] = (
            record.cells[index_b],
            record.cells[index_a],
        )
        logger.debug("Swapped row %d cells %d <-> %d", row, index_a, index_b)

    def clear_transient_markers(self) -> None:
        for record in self._records:
            if isinstance(record, Cell):
                record.pressed = False
                record.released = False
