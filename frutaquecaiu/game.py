"""Fruta que Caiu: catch falling fruit in a basket before time runs out."""

from __future__ import annotations

import argparse
import contextlib
import random
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from frutaquecaiu.keyboard import Keyboard
from frutaquecaiu.screen import MAXX, MAXY, Color, Screen
from frutaquecaiu.timer import Timer

BASKET_WIDTH = 9
SCREEN_BOTTOM = MAXY - 2
TIME_LIMIT = 60
SPAWN_PROBABILITY = 2
BASKET_STEP = 2
FRAME_MS = 60
LEADERBOARD_FILE = "leaderboard.txt"

FRUIT_SYMBOLS = ("🍎", "🍌", "🍇", "🥝", "🍊")
FRUIT_POINTS = (10, 20, 30, 50, 40)

KEY_ENTER = 10
KEY_RIGHT = 67
KEY_LEFT = 68

ALT_BUFFER_ON = "\033[?1049h"
ALT_BUFFER_OFF = "\033[?1049l"

_SCORE_LINE = re.compile(r"Player:\s*([+-]?\d+)")


@dataclass
class Fruit:
    """A fruit falling down the screen."""

    symbol: str
    color: int
    points: int
    x: int
    y: int


@dataclass
class Basket:
    """The player's basket; x is its leftmost column."""

    x: int


class Game:
    """State of one round: the basket, the falling fruit and the score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.basket = Basket((MAXX - BASKET_WIDTH) // 2)
        self.fruits: list[Fruit] = []
        self.score = 0

    def add_fruit(self) -> Fruit:
        """Spawn a random fruit near the top of the screen."""
        kind = self._rng.randrange(len(FRUIT_SYMBOLS))
        fruit = Fruit(
            symbol=FRUIT_SYMBOLS[kind],
            color=int(Color.WHITE) + kind,
            points=FRUIT_POINTS[kind],
            x=self._rng.randrange(MAXX - 4) + 2,
            y=2,
        )
        self.fruits.insert(0, fruit)
        return fruit

    def maybe_spawn(self) -> Fruit | None:
        """Spawn a fruit with a chance of SPAWN_PROBABILITY in ten."""
        if self._rng.randrange(10) < SPAWN_PROBABILITY:
            return self.add_fruit()
        return None

    def update_fruits(self) -> list[Fruit]:
        """Move every fruit down one row; return those caught by the basket."""
        caught: list[Fruit] = []
        falling: list[Fruit] = []
        for fruit in self.fruits:
            fruit.y += 1
            if fruit.y >= SCREEN_BOTTOM:
                if self.basket.x <= fruit.x <= self.basket.x + BASKET_WIDTH:
                    self.score += fruit.points
                    caught.append(fruit)
            else:
                falling.append(fruit)
        self.fruits = falling
        return caught

    def move_left(self) -> None:
        if self.basket.x > 1:
            self.basket.x -= BASKET_STEP

    def move_right(self) -> None:
        if self.basket.x + BASKET_WIDTH < MAXX - 1:
            self.basket.x += BASKET_STEP

    def clear(self) -> None:
        """Remove all fruit."""
        self.fruits.clear()


class Leaderboard:
    """Scores appended to a text file, one line per finished round."""

    def __init__(self, path: str | Path = LEADERBOARD_FILE) -> None:
        self.path = Path(path)

    def save(self, score: int) -> None:
        """Append a score; a file that cannot be opened is silently skipped."""
        with contextlib.suppress(OSError):
            with self.path.open("a", encoding="utf-8") as f:
                f.write(f"Player: {score} pontos\n")

    def top_score(self) -> int | None:
        """The highest recorded score, or None if nothing is recorded."""
        best = -1
        with contextlib.suppress(OSError):
            with self.path.open("r", encoding="utf-8", errors="replace") as f:
                for line in f:
                    match = _SCORE_LINE.match(line)
                    if match:
                        best = max(best, int(match.group(1)))
        return None if best == -1 else best


def draw_limits(screen: Screen) -> None:
    for y in range(1, SCREEN_BOTTOM + 1):
        screen.set_color(Color.WHITE, Color.BLACK)
        screen.gotoxy(0, y)
        screen.write("|")
        screen.gotoxy(MAXX - 1, y)
        screen.write("|")
    for x in range(MAXX):
        screen.set_color(Color.WHITE, Color.BLACK)
        screen.gotoxy(x, SCREEN_BOTTOM + 1)
        screen.write("_")


def draw_basket(screen: Screen, basket: Basket) -> None:
    screen.set_color(Color.BROWN, Color.BLACK)
    for offset in range(BASKET_WIDTH):
        screen.gotoxy(basket.x + offset, SCREEN_BOTTOM)
        screen.write("=")


def draw_fruits(screen: Screen, fruits: list[Fruit]) -> None:
    for fruit in fruits:
        screen.gotoxy(fruit.x, fruit.y)
        screen.write("  ")
    for fruit in fruits:
        screen.set_color(fruit.color, Color.BLACK)
        screen.gotoxy(fruit.x, fruit.y)
        screen.write(fruit.symbol)


def draw_hud(screen: Screen, score: int, remaining: int) -> None:
    screen.set_color(Color.WHITE, Color.BLACK)
    screen.gotoxy(2, 1)
    screen.write(f"Pontos: {score}")
    screen.gotoxy(MAXX - 20, 1)
    screen.write(f"Tempo restante: {remaining}s")
    screen.gotoxy(MAXX // 2 - 10, 1)
    screen.write("Fruta que Caiu " + "".join(FRUIT_SYMBOLS))


def show_top_score(screen: Screen, keyboard, leaderboard: Leaderboard) -> None:
    """Show the best score and wait for a key."""
    best = leaderboard.top_score()
    screen.clear()
    draw_limits(screen)
    screen.gotoxy(10, 10)
    if best is None:
        screen.write("Nenhum score registrado ainda.")
    else:
        screen.write(f"Top score: {best} pontos")
    screen.gotoxy(10, 12)
    screen.write("Pressione qualquer tecla para voltar ao menu...")
    screen.update()
    keyboard.readch()


def play(
    screen: Screen,
    keyboard,
    leaderboard: Leaderboard,
    rng: random.Random | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """Play one round until ENTER or the time limit; return the score."""
    game = Game(rng)
    start = clock()
    timer = Timer(FRAME_MS, clock=clock)
    screen.clear()

    ch = 0
    while ch != KEY_ENTER:
        elapsed = int(clock() - start)
        if elapsed >= TIME_LIMIT:
            break
        if keyboard.keyhit():
            ch = keyboard.readch()
            if ch == KEY_LEFT:
                game.move_left()
            if ch == KEY_RIGHT:
                game.move_right()

        if timer.time_over():
            screen.clear()
            draw_limits(screen)
            game.maybe_spawn()
            game.update_fruits()
            draw_fruits(screen, game.fruits)
            draw_basket(screen, game.basket)
            draw_hud(screen, game.score, TIME_LIMIT - elapsed)
            screen.update()

    game.clear()
    leaderboard.save(game.score)

    screen.clear()
    draw_limits(screen)
    screen.gotoxy(10, 10)
    screen.write(f"Fim de jogo! Pontuação: {game.score}\n")
    screen.gotoxy(10, 12)
    show_top_score(screen, keyboard, leaderboard)
    screen.update()
    return game.score


_MENU_LINES = (
    (3, "--- Fruta que Caiu ---"),
    (5, "Instruções:"),
    (6, "- Use as setas esquerda e direita para mover a cesta."),
    (7, "- Pegue as frutas que caem para somar pontos."),
    (8, "- Pressione ENTER para encerrar a partida."),
    (10, "1. Jogar"),
    (11, "2. Ver Top Score"),
    (12, "3. Sair"),
    (14, "Escolha uma opção: "),
)


def main_menu(screen: Screen, keyboard, leaderboard: Leaderboard) -> None:
    """Show the menu until the player chooses to leave."""
    while True:
        screen.clear()
        draw_limits(screen)
        for row, text in _MENU_LINES:
            screen.gotoxy(10, row)
            screen.write(text)
        screen.update()

        ch = keyboard.readch()
        if ch == ord("1"):
            play(screen, keyboard, leaderboard)
        elif ch == ord("2"):
            show_top_score(screen, keyboard, leaderboard)
        elif ch == ord("3"):
            break


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="frutaquecaiu",
        description="Catch the falling fruit with your basket.",
    )
    parser.parse_args(argv)

    screen = Screen()
    leaderboard = Leaderboard()
    screen.write(ALT_BUFFER_ON)
    screen.init(True)
    try:
        with Keyboard() as keyboard:
            main_menu(screen, keyboard, leaderboard)
    finally:
        screen.destroy()
        screen.write(ALT_BUFFER_OFF)
        screen.update()
    return 0