import sys
import os
import logging

import config_paths
from table_loader import TableLoader, TableLoadError
from table_store import RaggedRow

# Make ESC (and Alt chords) snappy
os.environ.setdefault("ESCDELAY", "25")

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"


logger = logging.getLogger(__name__)

DEFAULT_PATH = "table.csv"

USAGE = (
    "ecstable - drag cells around a table in the terminal\n\n"
    "Usage:\n  ecstable [path]\n  ecstable -v\n\n"
    "Drag a cell onto another cell of the same row to swap them. Press q to quit.\n"
)


def configure_logging(cfg):
    try:
        config_paths.ensure_config_dirs()
    except OSError as exc:
        print(f"Logging disabled: {exc}", file=sys.stderr)
        logging.disable(logging.CRITICAL)
        return
    logging.basicConfig(
        filename=config_paths.LOG_PATH,
        level=getattr(logging, cfg["LOG_LEVEL"]),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        return 2

    cfg = config_paths.load_config()
    configure_logging(cfg)

    path = args[0] if args else DEFAULT_PATH

    from app_state import AppState

    try:
        columns, rows = TableLoader(path).load_table()
        state = AppState(
            columns, rows, path, selected_column=cfg["SELECTED_COLUMN"]
        )
    except (TableLoadError, RaggedRow) as exc:
        logger.error("Load failed for %s: %s", path, exc)
        print(f"Load failed: {exc}", file=sys.stderr)
        return 1

    from orchestrator import Orchestrator
    from terminal_session import terminal_session

    logger.info("Loaded %s with shape %s", path, state.shape)
    try:
        with terminal_session() as stdscr:
            Orchestrator(stdscr, state, cfg).run()
    except Exception:
        logger.exception("Fatal error in interactive loop")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
