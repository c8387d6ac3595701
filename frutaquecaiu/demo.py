"""A bouncing "Hello World" that also echoes key codes."""

from __future__ import annotations

from frutaquecaiu.keyboard import Keyboard
from frutaquecaiu.screen import MAXX, MAXY, MINX, MINY, Color, Screen
from frutaquecaiu.timer import Timer

HELLO = "Hello World"
KEY_ENTER = 10
KEY_ESC = 27
MAX_TICKS = 100


class Bouncer:
    """A position that moves diagonally and bounces off the screen edges."""

    def __init__(self, x: int = 34, y: int = 12) -> None:
        self.x = x
        self.y = y
        self.inc_x = 1
        self.inc_y = 1

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def step(self) -> tuple[int, int]:
        """Advance one step and return the new position."""
        new_x = self.x + self.inc_x
        if new_x >= MAXX - len(HELLO) - 1 or new_x <= MINX + 1:
            self.inc_x = -self.inc_x
        new_y = self.y + self.inc_y
        if new_y >= MAXY - 1 or new_y <= MINY + 1:
            self.inc_y = -self.inc_y
        self.x, self.y = new_x, new_y
        return new_x, new_y


def print_hello(screen: Screen, old: tuple[int, int], new: tuple[int, int]) -> None:
    """Erase the greeting at old and draw it at new."""
    screen.set_color(Color.CYAN, Color.DARKGRAY)
    screen.gotoxy(*old)
    screen.write(" " * len(HELLO))
    screen.gotoxy(*new)
    screen.write(HELLO)


def print_keys(screen: Screen, keyboard, ch: int) -> None:
    """Show the code of a key and of any further bytes already waiting."""
    screen.set_color(Color.YELLOW, Color.DARKGRAY)
    screen.gotoxy(35, 22)
    screen.write("Key code :")
    screen.gotoxy(34, 23)
    screen.write(" " * 12)
    screen.gotoxy(36 if ch == KEY_ESC else 39, 23)
    screen.write(f"{ch} ")
    while keyboard.keyhit():
        screen.write(f"{keyboard.readch()} ")


def run(screen: Screen, keyboard, timer: Timer | None = None) -> int:
    """Animate until ENTER or the tick limit; return the ticks elapsed."""
    timer = timer if timer is not None else Timer(50)
    bouncer = Bouncer()
    print_hello(screen, bouncer.position, bouncer.position)
    screen.update()

    ch = 0
    ticks = 0
    while ch != KEY_ENTER and ticks <= MAX_TICKS:
        if keyboard.keyhit():
            ch = keyboard.readch()
            print_keys(screen, keyboard, ch)
            screen.update()

        if timer.time_over():
            old = bouncer.position
            print_hello(screen, old, bouncer.step())
            screen.update()
            ticks += 1
    return ticks


def main(argv: list[str] | None = None) -> int:
    screen = Screen()
    timer = Timer(50)
    screen.init(True)
    try:
        with Keyboard() as keyboard:
            run(screen, keyboard, timer)
    finally:
        screen.destroy()
        timer.destroy()
        screen.update()
    return 0