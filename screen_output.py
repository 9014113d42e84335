import curses

import wcwidth


def display_width(text):
    """Terminal columns taken by *text*; non-printable characters count as 0."""
    width = wcwidth.wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth.wcwidth(ch), 0) for ch in text)


def clip_to_width(text, room):
    used = 0
    for idx, ch in enumerate(text):
        w = max(wcwidth.wcwidth(ch), 0)
        if used + w > room:
            return text[:idx]
        used += w
    return text


class ScreenOutput:
    """Cursor/text primitives over a curses window.

    Text that would run past the right edge or below the last line is clipped;
    the logical cursor still advances by the full display width of the text.
    """

    def __init__(self, win):
        self.win = win
        self.col = 0
        self.row = 0

    def size(self):
        h, w = self.win.getmaxyx()
        return w, h

    def move_cursor(self, col, row):
        self.col = col
        self.row = row

    def write_text(self, text):
        w, h = self.size()
        if 0 <= self.row < h and 0 <= self.col < w and text:
            visible = clip_to_width(text, w - self.col)
            try:
                self.win.addnstr(self.row, self.col, visible, len(visible))
            except curses.error:
                # writing the bottom-right cell moves the cursor off-screen
                pass
        self.col += display_width(text)

    def clear_screen(self):
        self.win.erase()
        self.col = 0
        self.row = 0

    def flush(self):
        self.win.refresh()
