import os

import pandas as pd


class TableLoadError(Exception):
    pass


class TableLoader:
    SUPPORTED = {".csv", ".tsv", ".parquet", ".xlsx"}

    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

    def load_table(self) -> tuple[list[str], list[list[str]]]:
        """Read the file as ordered column names and rows of string cells."""
        if self.ext not in self.SUPPORTED:
            raise TableLoadError(
                f"Unsupported file type {self.ext or '(none)'} (use .csv, .tsv, .parquet, or .xlsx)"
            )
        if not os.path.exists(self.path):
            raise TableLoadError(f"No such file: {self.path}")

        df = self._read_frame()
        if df.shape[1] == 0:
            raise TableLoadError(f"No columns in {self.path}")

        columns = [str(c) for c in df.columns]
        rows = [
            ["" if pd.isna(v) else str(v) for v in record]
            for record in df.itertuples(index=False, name=None)
        ]
        return columns, rows

    def _read_frame(self) -> pd.DataFrame:
        try:
            if self.ext in {".csv", ".tsv"}:
                return pd.read_csv(
                    self.path,
                    sep="\t" if self.ext == ".tsv" else ",",
                    dtype=str,
                    keep_default_na=False,
                )
            if self.ext == ".parquet":
                self._ensure_parquet_engine()
                return pd.read_parquet(self.path)
            self._ensure_excel_engine()
            return pd.read_excel(self.path, sheet_name=0, dtype=str)
        except pd.errors.EmptyDataError:
            raise TableLoadError(f"{self.path} is empty")
        except pd.errors.ParserError as exc:
            raise TableLoadError(f"Malformed data in {self.path}: {exc}")
        except (OSError, ValueError) as exc:
            raise TableLoadError(f"Could not read {self.path}: {exc}")

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401

            return
        except ImportError:
            pass
        raise TableLoadError(
            "Parquet support requires pyarrow. Install via: pip install pyarrow"
        )

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401

            return
        except ImportError:
            pass
        raise TableLoadError(
            "XLSX support requires openpyxl. Install via: pip install openpyxl"
        )
