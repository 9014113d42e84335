from typing import List, Optional


class HitCanvas:
    """Screen-sized buffer recording which entity last drew at each cell.

    Works like picking with an id framebuffer: the renderer paints entity
    handles alongside the glyphs, and a mouse position is resolved by reading
    the slot back.
    """

    def __init__(self, width: int = 0, height: int = 0):
        self.width = 0
        self.height = 0
        self._slots: List[Optional[int]] = []
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self._slots = [None] * (self.width * self.height)

    def clear(self) -> None:
        for i in range(len(self._slots)):
            self._slots[i] = None

    def paint(self, entity: int, col: int, row: int, length: int) -> None:
        if row < 0 or row >= self.height or col < 0 or col >= self.width:
            return
        end = min(col + max(0, length), self.width)
        base = row * self.width
        for c in range(col, end):
            self._slots[base + c] = entity

    def lookup(self, col: int, row: int) -> Optional[int]:
        if row < 0 or row >= self.height or col < 0 or col >= self.width:
            return None
        return self._slots[row * self.width + col]

    def dump(self) -> str:
        lines = []
        for r in range(self.height):
            base = r * self.width
            lines.append(
                "".join(
                    "0" if self._slots[base + c] is None else "1"
                    for c in range(self.width)
                )
            )
        return "\n".join(lines)
