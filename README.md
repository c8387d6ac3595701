# Fruta que Caiu

A small arcade game for the terminal. Fruit falls from the top of the screen.
Move the basket along the bottom with the arrow keys and catch as much as you
can before the 60 seconds run out.

## Installing

```
pip install .
```

The game draws with ANSI escape sequences and reads the keyboard in raw mode
through `termios`. It needs a POSIX terminal that is at least 80 columns by
24 rows.

## Playing

```
frutaquecaiu
```

The main menu offers three choices:

1. **Jogar**: start a round.
2. **Ver Top Score**: show the best score recorded so far.
3. **Sair**: quit.

During a round:

- the left and right arrow keys move the basket two columns at a time,
- each fruit that reaches the bottom over the basket adds points:
  🍎 10, 🍌 20, 🍇 30, 🍊 40, 🥝 50,
- ENTER ends the round early.

When a round ends, its score is appended to `leaderboard.txt` in the current
directory as a line `Player: <score> pontos`, and the top score is shown.

## Terminal demo

```
frutaquecaiu-demo
```

This bounces a "Hello World" banner around a bordered screen and prints the
codes of the keys you press. It stops on ENTER or after 100 animation steps
of just over 50 ms each.

## Using the pieces

The terminal helpers can be used on their own:

- `frutaquecaiu.screen.Screen` writes cursor movement, colour and
  box-drawing sequences to any text stream (stdout by default). Colours come
  from `frutaquecaiu.screen.Color`.
- `frutaquecaiu.keyboard.Keyboard` puts a terminal into unbuffered,
  no-echo mode. Use it as a context manager, and poll it with `keyhit()` and
  `readch()`.
- `frutaquecaiu.timer.Timer` is a millisecond interval timer. Its
  `time_over()` returns true once the delay has passed and then starts the
  interval again. It takes an optional clock function.

The game logic in `frutaquecaiu.game.Game` does no terminal work and takes a
`random.Random`, so a round can be driven step by step with
`maybe_spawn()`, `update_fruits()`, `move_left()` and `move_right()`.
`frutaquecaiu.game.Leaderboard` saves scores to a file and reads back the
best one with `top_score()`, which is `None` when nothing is recorded.

## Tests

```
pip install .[test]
pytest
```