from table_store import TableStore


class AppState:
    def __init__(self, columns, rows, file_path, selected_column=1):
        self.file_path = file_path
        self.store = TableStore()
        self.table = self.store.build(columns, rows, selected_column=selected_column)

    @property
    def shape(self):
        return (
            len(self.store.get(self.table).rows),
            self.store.header_count(self.table),
        )

    def row_handles(self):
        return list(self.store.get(self.table).rows)

    def row_texts(self):
        return [self.store.row_texts(r) for r in self.row_handles()]
