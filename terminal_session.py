import contextlib
import curses
import logging


logger = logging.getLogger(__name__)


def enter_session():
    """Take over the terminal: raw keys, no echo, mouse reporting, own screen."""
    stdscr = curses.initscr()
    try:
        curses.noecho()
        curses.raw()
        stdscr.keypad(True)
        stdscr.nodelay(False)
        stdscr.timeout(-1)
        try:
            curses.start_color()
            curses.use_default_colors()
        except curses.error:
            pass
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        # report press and release separately instead of folding them into clicks
        curses.mouseinterval(0)
    except Exception:
        exit_session(stdscr)
        raise
    logger.debug("Terminal session entered (%s)", stdscr.getmaxyx())
    return stdscr


def exit_session(stdscr):
    """Restore the terminal. Every step runs even when an earlier one fails."""
    steps = (
        ("disable mouse", lambda: curses.mousemask(0)),
        ("show cursor", lambda: curses.curs_set(1)),
        ("disable keypad", lambda: stdscr.keypad(False)),
        ("leave raw mode", curses.noraw),
        ("restore echo", curses.echo),
        ("end window", curses.endwin),
    )
    for name, step in steps:
        try:
            step()
        except curses.error as exc:
            logger.warning("Terminal teardown step %r failed: %s", name, exc)
    logger.debug("Terminal session exited")


@contextlib.contextmanager
def terminal_session():
    stdscr = enter_session()
    try:
        yield stdscr
    finally:
        exit_session(stdscr)
