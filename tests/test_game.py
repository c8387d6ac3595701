import io
import random

import pytest

from frutaquecaiu import game
from frutaquecaiu.game import (
    BASKET_STEP,
    BASKET_WIDTH,
    FRUIT_POINTS,
    FRUIT_SYMBOLS,
    SCREEN_BOTTOM,
    Basket,
    Fruit,
    Game,
    Leaderboard,
    draw_basket,
    draw_hud,
    draw_limits,
    main_menu,
    play,
    show_top_score,
)
from frutaquecaiu.screen import MAXX, Screen


class SeqRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, n):
        value = next(self._values)
        assert 0 <= value < n
        return value


class FakeKeyboard:
    """pending keys are reported by keyhit; blocking keys only by readch."""

    def __init__(self, pending=(), blocking=()):
        self.pending = list(pending)
        self.blocking = list(blocking)

    def keyhit(self):
        return bool(self.pending)

    def readch(self):
        if self.pending:
            return self.pending.pop(0)
        return self.blocking.pop(0)


def ticking_clock(step):
    state = {"now": 0.0}

    def clock():
        state["now"] += step
        return state["now"]

    return clock


def make_screen():
    out = io.StringIO()
    return Screen(out), out


def test_basket_starts_centred():
    g = Game(random.Random(0))
    assert g.basket.x == (MAXX - BASKET_WIDTH) // 2
    assert g.score == 0
    assert g.fruits == []


def test_move_left_and_limit():
    g = Game(random.Random(0))
    start = g.basket.x
    g.move_left()
    assert g.basket.x == start - BASKET_STEP
    g.basket.x = 1
    g.move_left()
    assert g.basket.x == 1


def test_move_right_and_limit():
    g = Game(random.Random(0))
    start = g.basket.x
    g.move_right()
    assert g.basket.x == start + BASKET_STEP
    g.basket.x = MAXX - 1 - BASKET_WIDTH
    g.move_right()
    assert g.basket.x == MAXX - 1 - BASKET_WIDTH


def test_add_fruit_properties():
    g = Game(random.Random(5))
    for _ in range(50):
        fruit = g.add_fruit()
        assert g.fruits[0] is fruit
        assert fruit.y == 2
        assert 2 <= fruit.x <= MAXX - 3
        kind = FRUIT_SYMBOLS.index(fruit.symbol)
        assert fruit.points == FRUIT_POINTS[kind]


def test_maybe_spawn_uses_source_tables():
    g = Game(SeqRng([1, 3, 10]))
    fruit = g.maybe_spawn()
    assert fruit.symbol == "🥝"
    assert fruit.points == 50
    assert fruit.x == 12
    assert g.fruits == [fruit]


def test_maybe_spawn_declines():
    g = Game(SeqRng([SPAWN := game.SPAWN_PROBABILITY]))
    assert g.maybe_spawn() is None
    assert g.fruits == []
    assert SPAWN == game.SPAWN_PROBABILITY


def test_update_catches_fruit_in_basket():
    g = Game(random.Random(0))
    fruit = Fruit("🍎", 15, 10, g.basket.x + BASKET_WIDTH, SCREEN_BOTTOM - 1)
    g.fruits = [fruit]
    caught = g.update_fruits()
    assert caught == [fruit]
    assert g.score == 10
    assert g.fruits == []


def test_update_drops_missed_fruit():
    g = Game(random.Random(0))
    missed = Fruit("🍌", 16, 20, g.basket.x - 1, SCREEN_BOTTOM - 1)
    high = Fruit("🍇", 17, 30, 5, 3)
    g.fruits = [missed, high]
    assert g.update_fruits() == []
    assert g.score == 0
    assert g.fruits == [high]
    assert high.y == 4


def test_clear_removes_fruit():
    g = Game(random.Random(0))
    g.add_fruit()
    g.clear()
    assert g.fruits == []


def test_leaderboard_missing_file(tmp_path):
    assert Leaderboard(tmp_path / "none.txt").top_score() is None


def test_leaderboard_save_and_top(tmp_path):
    path = tmp_path / "board.txt"
    board = Leaderboard(path)
    for score in (30, 120, 40):
        board.save(score)
    assert board.top_score() == 120
    assert path.read_text(encoding="utf-8").splitlines()[0] == "Player: 30 pontos"


def test_leaderboard_ignores_other_lines(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text("garbage\nPlayer: 70 pontos\nscore 900\n", encoding="utf-8")
    assert Leaderboard(path).top_score() == 70


def test_draw_limits_counts():
    screen, out = make_screen()
    draw_limits(screen)
    text = out.getvalue()
    assert text.count("|") == 2 * SCREEN_BOTTOM
    assert text.count("_") == MAXX


def test_draw_basket_width():
    screen, out = make_screen()
    draw_basket(screen, Basket(10))
    assert out.getvalue().count("=") == BASKET_WIDTH


def test_draw_fruits_writes_symbols():
    screen, out = make_screen()
    fruits = [Fruit("🍊", 19, 40, 7, 5), Fruit("🍎", 15, 10, 9, 6)]
    game.draw_fruits(screen, fruits)
    text = out.getvalue()
    assert text.count("🍊") == 1 and text.count("🍎") == 1


def test_draw_hud_text():
    screen, out = make_screen()
    draw_hud(screen, 120, 45)
    text = out.getvalue()
    assert "Pontos: 120" in text
    assert "Tempo restante: 45s" in text


def test_show_top_score_empty(tmp_path):
    screen, out = make_screen()
    keyboard = FakeKeyboard(blocking=[ord("x")])
    show_top_score(screen, keyboard, Leaderboard(tmp_path / "b.txt"))
    assert "Nenhum score registrado ainda." in out.getvalue()
    assert keyboard.blocking == []


def test_play_enter_ends_round(tmp_path):
    screen, out = make_screen()
    board = Leaderboard(tmp_path / "b.txt")
    keyboard = FakeKeyboard(pending=[10], blocking=[ord("x")])
    score = play(screen, keyboard, board, random.Random(1), clock=lambda: 0.0)
    assert score == 0
    assert board.top_score() == 0
    assert "Fim de jogo! Pontuação: 0" in out.getvalue()


def test_play_runs_until_time_limit(tmp_path):
    screen, out = make_screen()
    board = Leaderboard(tmp_path / "b.txt")
    keyboard = FakeKeyboard(blocking=[ord("x")])
    score = play(screen, keyboard, board, random.Random(3), clock=ticking_clock(0.25))
    assert score == board.top_score()
    assert score % 10 == 0
    assert "Tempo restante" in out.getvalue()
    assert keyboard.blocking == []


def test_main_menu_top_score_then_quit(tmp_path):
    screen, out = make_screen()
    board = Leaderboard(tmp_path / "b.txt")
    board.save(70)
    keyboard = FakeKeyboard(blocking=[ord("9"), ord("2"), ord("x"), ord("3")])
    main_menu(screen, keyboard, board)
    assert "Top score: 70 pontos" in out.getvalue()
    assert keyboard.blocking == []


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        game.main(["--help"])
    assert excinfo.value.code == 0