import unittest

from table_store import (
    Cell,
    Header,
    InvalidIndex,
    RaggedRow,
    Row,
    StaleEntity,
    Table,
    TableStore,
)


COLUMNS = ["Name", "Age", "City"]
ROWS = [["Ann", "30", "Oslo"], ["Bo", "25", "Rome"]]


class TableStoreBuildTests(unittest.TestCase):
    def setUp(self):
        self.store = TableStore()
        self.table = self.store.build(COLUMNS, ROWS)

    def test_headers_and_rows_in_source_order(self):
        self.assertEqual(self.store.header_texts(self.table), COLUMNS)
        rows = self.store.get(self.table, Table).rows
        self.assertEqual([self.store.row_texts(r) for r in rows], ROWS)

    def test_every_row_has_header_count_cells(self):
        for r in self.store.get(self.table, Table).rows:
            self.assertEqual(self.store.cell_count(r), self.store.header_count(self.table))

    def test_back_references(self):
        table = self.store.get(self.table, Table)
        for h in table.headers:
            self.assertEqual(self.store.get(h, Header).table, self.table)
        for r in table.rows:
            self.assertEqual(self.store.get(r, Row).table, self.table)
            for c in self.store.get(r, Row).cells:
                self.assertEqual(self.store.get(c, Cell).row, r)

    def test_second_column_selected_by_default(self):
        table = self.store.get(self.table, Table)
        selected = [self.store.get(h, Header).selected for h in table.headers]
        self.assertEqual(selected, [False, True, False])
        for r in table.rows:
            cells = self.store.get(r, Row).cells
            self.assertEqual(
                [self.store.get(c, Cell).selected for c in cells], [False, True, False]
            )

    def test_selection_can_be_disabled(self):
        store = TableStore()
        table = store.build(COLUMNS, ROWS, selected_column=None)
        for h in store.get(table, Table).headers:
            self.assertFalse(store.get(h, Header).selected)

    def test_ragged_row_rejected(self):
        store = TableStore()
        with self.assertRaises(RaggedRow):
            store.build(["a", "b"], [["1", "2"], ["3"]])
        self.assertEqual(list(store.tables()), [])

    def test_values_coerced_to_text(self):
        store = TableStore()
        table = store.build(["n"], [[1], [2.5]])
        rows = store.get(table, Table).rows
        self.assertEqual(store.row_texts(rows[1]), ["2.5"])


class TableStoreLookupTests(unittest.TestCase):
    def setUp(self):
        self.store = TableStore()
        self.table = self.store.build(COLUMNS, ROWS)

    def test_find_unknown_handle_is_none(self):
        self.assertIsNone(self.store.find(10_000))
        self.assertIsNone(self.store.find(-1))
        self.assertIsNone(self.store.find(None))

    def test_find_with_wrong_kind_is_none(self):
        self.assertIsNone(self.store.find(self.table, Cell))

    def test_get_stale_handle_raises(self):
        with self.assertRaises(StaleEntity):
            self.store.get(10_000)
        with self.assertRaises(StaleEntity):
            self.store.get(self.table, Row)

    def test_index_in_row(self):
        row = self.store.get(self.table, Table).rows[0]
        cells = self.store.get(row, Row).cells
        self.assertEqual([self.store.index_in_row(c) for c in cells], [0, 1, 2])


class TableStoreSwapTests(unittest.TestCase):
    def setUp(self):
        self.store = TableStore()
        self.table = self.store.build(COLUMNS, ROWS)
        self.rows = self.store.get(self.table, Table).rows

    def test_swap_exchanges_only_target_row(self):
        self.store.swap_cells_in_row(self.rows[0], 0, 2)
        self.assertEqual(self.store.row_texts(self.rows[0]), ["Oslo", "30", "Ann"])
        self.assertEqual(self.store.row_texts(self.rows[1]), ["Bo", "25", "Rome"])
        self.assertEqual(self.store.header_texts(self.table), COLUMNS)

    def test_swap_twice_restores_order(self):
        self.store.swap_cells_in_row(self.rows[1], 1, 2)
        self.store.swap_cells_in_row(self.rows[1], 1, 2)
        self.assertEqual(self.store.row_texts(self.rows[1]), ROWS[1])

    def test_swap_same_index_is_noop(self):
        self.store.swap_cells_in_row(self.rows[0], 1, 1)
        self.assertEqual(self.store.row_texts(self.rows[0]), ROWS[0])

    def test_swap_out_of_range_raises(self):
        with self.assertRaises(InvalidIndex):
            self.store.swap_cells_in_row(self.rows[0], 0, 3)
        with self.assertRaises(InvalidIndex):
            self.store.swap_cells_in_row(self.rows[0], -1, 0)
        self.assertEqual(self.store.row_texts(self.rows[0]), ROWS[0])

    def test_swap_rejects_foreign_cell(self):
        # corrupt the row with a cell that belongs elsewhere
        foreign = self.store.get(self.rows[1], Row).cells[0]
        self.store.get(self.rows[0], Row).cells[0] = foreign
        with self.assertRaises(InvalidIndex):
            self.store.swap_cells_in_row(self.rows[0], 0, 1)

    def test_swap_on_non_row_handle_raises(self):
        with self.assertRaises(StaleEntity):
            self.store.swap_cells_in_row(self.table, 0, 1)

    def test_cell_count_invariant_survives_swaps(self):
        self.store.swap_cells_in_row(self.rows[0], 0, 1)
        self.store.swap_cells_in_row(self.rows[1], 2, 0)
        for r in self.rows:
            self.assertEqual(self.store.cell_count(r), self.store.header_count(self.table))

    def test_clear_transient_markers(self):
        cell = self.store.get(self.store.get(self.rows[0], Row).cells[0], Cell)
        cell.pressed = True
        cell.released = True
        self.store.clear_transient_markers()
        self.assertFalse(cell.pressed)
        self.assertFalse(cell.released)
        self.assertFalse(cell.selected)


if __name__ == "__main__":
    unittest.main()
