"""ANSI terminal drawing: cursor movement, colours and box borders."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

ESC = "\033"
NORMALTEXT = "[0m"
BOLDTEXT = "[1m"
ITALICTEXT = "[3m"
BLINKTEXT = "[5m"
REVERSETEXT = "[7m"
HOMECURSOR = "[f"
SHOWCURSOR = "[?25h"
HIDECURSOR = "[?25l"
CLEARSCREEN = "[2J"
RESETCOLORS = "[0;39;49m"

BOX_ENABLE = "(0"
BOX_DISABLE = "(B"
BOX_VLINE = 0x78
BOX_HLINE = 0x71
BOX_UPLEFT = 0x6C
BOX_UPRIGHT = 0x6B
BOX_DWNLEFT = 0x6D
BOX_DWNRIGHT = 0x6A
BOX_CROSS = 0x6E
BOX_TLEFT = 0x74
BOX_TRIGHT = 0x75
BOX_TUP = 0x77
BOX_TDOWN = 0x76
BOX_DIAMOND = 0x60
BOX_BLOCK = 0x61
BOX_DOT = 0x7E

SCRSTARTX = 3
SCRENDX = 75
SCRSTARTY = 1
SCRENDY = 23

MINX = 1
MINY = 1
MAXX = 80
MAXY = 24


class Color(IntEnum):
    """The sixteen terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    BROWN = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTRED = 9
    LIGHTGREEN = 10
    YELLOW = 11
    LIGHTBLUE = 12
    LIGHTMAGENTA = 13
    LIGHTCYAN = 14
    WHITE = 15


class Screen:
    """Writes ANSI control sequences to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)

    def _control(self, sequence: str) -> None:
        self.write(ESC + sequence)

    def home_cursor(self) -> None:
        self._control(HOMECURSOR)

    def show_cursor(self) -> None:
        self._control(SHOWCURSOR)

    def hide_cursor(self) -> None:
        self._control(HIDECURSOR)

    def clear(self) -> None:
        self.home_cursor()
        self._control(CLEARSCREEN)

    def update(self) -> None:
        """Flush pending output so it appears immediately."""
        self.stream.flush()

    def set_normal(self) -> None:
        self._control(NORMALTEXT)

    def set_bold(self) -> None:
        self._control(BOLDTEXT)

    def set_blink(self) -> None:
        self._control(BLINKTEXT)

    def set_reverse(self) -> None:
        self._control(REVERSETEXT)

    def box_enable(self) -> None:
        self._control(BOX_ENABLE)

    def box_disable(self) -> None:
        self._control(BOX_DISABLE)

    def _put(self, x: int, y: int, code: int) -> None:
        self.gotoxy(x, y)
        self.write(chr(code))

    def draw_borders(self) -> None:
        """Clear the screen and draw a line-drawing box around it."""
        self.clear()
        self.box_enable()

        self._put(MINX, MINY, BOX_UPLEFT)
        for x in range(MINX + 1, MAXX):
            self._put(x, MINY, BOX_HLINE)
        self._put(MAXX, MINY, BOX_UPRIGHT)

        for y in range(MINY + 1, MAXY):
            self._put(MINX, y, BOX_VLINE)
            self._put(MAXX, y, BOX_VLINE)

        self._put(MINX, MAXY, BOX_DWNLEFT)
        for x in range(MINX + 1, MAXX):
            self._put(x, MAXY, BOX_HLINE)
        self._put(MAXX, MAXY, BOX_DWNRIGHT)

        self.box_disable()

    def init(self, draw_borders: bool = False) -> None:
        """Clear the screen, optionally draw borders, home and hide the cursor."""
        self.clear()
        if draw_borders:
            self.draw_borders()
        self.home_cursor()
        self.hide_cursor()

    def destroy(self) -> None:
        """Reset colours and attributes, clear the screen and show the cursor."""
        self._control(RESETCOLORS)
        self.set_normal()
        self.clear()
        self.home_cursor()
        self.show_cursor()

    def gotoxy(self, x: int, y: int) -> None:
        """Move the cursor to (x, y), clamped to the screen area."""
        x = min(max(x, 0), MAXX - 1)
        y = min(max(y, 0), MAXY)
        self.write(f"{ESC}{HOMECURSOR}{ESC}[{y}B{ESC}[{x}C")

    def set_color(self, fg: Color | int, bg: Color | int) -> None:
        """Set foreground and background colours; bright colours use bold."""
        fg = int(fg)
        bg = int(bg)
        attr = "[0;"
        if fg > Color.LIGHTGRAY:
            attr = "[1;"
            fg -= 8
        self.write(f"{ESC}{attr}{fg + 30};{bg + 40}m")