"""A terminal snake game on a wrapping board."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from typing import Callable, Sequence

_CLEAR = "\033[H\033[2J"
FRUIT_SCORE = 10


class SnakeGame:
    """Board state and rules; the head moves one cell per key press."""

    def __init__(
        self,
        width: int = 20,
        height: int = 17,
        rng: random.Random | None = None,
        delay: float = 0.1,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.delay = delay
        self.score = 0
        self.game_over = False
        self.x = width // 2
        self.y = height // 2
        self.fruit = self._place_fruit()
        self.tail: list[tuple[int, int]] = []
        self.tail_length = 0

    def _place_fruit(self) -> tuple[int, int]:
        return self.rng.randrange(self.width), self.rng.randrange(self.height)

    def render(self) -> str:
        """The board framed by '#', followed by the score."""
        body = set(self.tail[: self.tail_length])
        border = "#" * (self.width + 2)
        rows = [border]
        for row in range(self.height):
            cells = []
            for col in range(self.width):
                if (col, row) == (self.x, self.y):
                    cells.append("O")
                elif (col, row) == self.fruit:
                    cells.append("F")
                elif (col, row) in body:
                    cells.append("o")
                else:
                    cells.append(" ")
            rows.append("#" + "".join(cells) + "#")
        rows.append(border)
        rows.append(f"Score: {self.score}")
        return "\n".join(rows) + "\n"

    def apply_key(self, key: str) -> None:
        """Move the head with w/a/s/d; 'x' ends the game; other keys do nothing."""
        if key == "a":
            self.x -= 1
        elif key == "d":
            self.x += 1
        elif key == "w":
            self.y -= 1
        elif key == "s":
            self.y += 1
        elif key == "x":
            self.game_over = True

    def step(self) -> None:
        """Advance the tail, wrap the head, then check collisions and fruit."""
        previous = self.tail[0] if self.tail else (self.x, self.y)
        self.tail.append(previous)
        if len(self.tail) > self.tail_length:
            del self.tail[0]
        if self.tail_length > 0:
            self.tail[1 : self.tail_length] = self.tail[0 : self.tail_length - 1]
            self.tail[0] = (self.x, self.y)

        if self.x >= self.width:
            self.x = 0
        elif self.x < 0:
            self.x = self.width - 1
        if self.y >= self.height:
            self.y = 0
        elif self.y < 0:
            self.y = self.height - 1

        if (self.x, self.y) in self.tail[: self.tail_length]:
            self.game_over = True

        if (self.x, self.y) == self.fruit:
            self.score += FRUIT_SCORE
            self.fruit = self._place_fruit()
            self.tail_length += 1

    def run(self, read_key: Callable[[], str]) -> int:
        """Play until the game ends and return the score."""
        while not self.game_over:
            sys.stdout.write(_CLEAR + self.render())
            sys.stdout.flush()
            self.apply_key(read_key())
            self.step()
            if self.delay > 0:
                time.sleep(self.delay)
        return self.score


def _read_key() -> str:
    """Read one key without waiting for Enter when attached to a terminal."""
    stream = sys.stdin
    try:
        import termios
    except ImportError:
        return stream.read(1) or "x"
    if not stream.isatty():
        return stream.read(1) or "x"
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)
    return data.decode(errors="replace") or "x"


def main(argv: Sequence[str] | None = None) -> int:
    """Play snake in the terminal: w/a/s/d to move, x to quit."""
    parser = argparse.ArgumentParser(prog="dsakit-snake", description="Play snake.")
    parser.add_argument("--width", type=int, default=20)
    parser.add_argument("--height", type=int, default=17)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--delay", type=float, default=0.1, help="seconds between moves")
    args = parser.parse_args(argv)
    try:
        game = SnakeGame(args.width, args.height, random.Random(args.seed), args.delay)
    except ValueError as exc:
        parser.error(str(exc))
    score = game.run(_read_key)
    print(f"Final score: {score}")
    return 0