"""A baccarat-style card game: banker against player, nearest to 9 wins.

Each side draws two cards valued 1 to 10; the hand's value is their sum
modulo 10. A two-card value of 8 or 9 is a natural and stands; otherwise
a third card is drawn and added, again modulo 10.
"""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

NATURALS = (8, 9)
STARTING_MONEY = 10000
_WIDE_RULE = "=" * 30
_RESULT_RULE = "=" * 34


class _CardSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class Side(Enum):
    """The side a player bets on."""

    BANKER = 1
    PLAYER = 2


class Outcome(Enum):
    """Who won a round."""

    BANKER = 1
    PLAYER = 2
    DRAW = 3


@dataclass(frozen=True)
class Hand:
    """Two cards, an optional extra card and the resulting value (0 to 9)."""

    first: int
    second: int
    extra: int | None
    total: int

    @property
    def natural(self) -> bool:
        return self.extra is None


def _card(rng: _CardSource) -> int:
    return rng.randint(1, 10)


def draw_hand(rng: _CardSource) -> Hand:
    """Draw a hand; a third card is drawn unless the first two make 8 or 9."""
    first = _card(rng)
    second = _card(rng)
    total = (first + second) % 10
    if total in NATURALS:
        return Hand(first, second, None, total)
    extra = _card(rng)
    return Hand(first, second, extra, (total + extra) % 10)


def decide_winner(banker_total: int, player_total: int) -> Outcome:
    """The higher total wins; equal totals are a draw."""
    if banker_total > player_total:
        return Outcome.BANKER
    if banker_total < player_total:
        return Outcome.PLAYER
    return Outcome.DRAW


def payout(winner: Outcome, choice: Side, bet: int) -> int:
    """Money won (positive), lost (negative) or zero on a draw; pays 1:1."""
    winner = Outcome(winner)
    choice = Side(choice)
    if winner.value == choice.value:
        return bet
    if winner is Outcome.DRAW:
        return 0
    return -bet


def should_continue(answer: str, money: int) -> bool:
    """Whether another round is played after answering the play-again prompt.

    Raises ValueError when the answer is neither yes nor no.
    """
    if money <= 0:
        return False
    letter = answer.strip()[:1].lower()
    if letter == "y":
        return True
    if letter == "n":
        return False
    raise ValueError(f"expected Y or N, got {answer!r}")


def format_hand(hand: Hand) -> str:
    """The card drawing and the cards that made up the hand."""
    box = ["=======", "|     |", f"|  {hand.total}  |", "|     |", "======="]
    if hand.natural:
        details = [
            "This is a natural win 8/9 ",
            f"First Card {hand.first}",
            f"Second Card {hand.second}",
        ]
    else:
        details = [
            f"First Card {hand.first}",
            f"Second Card {hand.second}",
            f"Extra Card {hand.extra}",
        ]
    return "\n".join(box + details)


_WIN_TEXT = {
    Outcome.BANKER: "BANKER WIN, ",
    Outcome.PLAYER: "PLAYER WIN, ",
    Outcome.DRAW: "DRAW, ",
}


def _verdict(winner: Outcome, choice: Side) -> str:
    if winner.value == choice.value:
        return "YOU WIN!"
    if winner is Outcome.DRAW:
        return "Tie Game!"
    return "YOU LOSE!"


def _ask_side() -> Side:
    while True:
        text = input("1-BANKER \n2-PLAYER \nChoose your bet ")
        try:
            return Side(int(text))
        except ValueError:
            print()


def _ask_bet(money: int) -> int:
    while True:
        text = input("Place your bet, Coin: ")
        try:
            bet = int(text)
        except ValueError:
            continue
        if bet <= money:
            return bet


def _ask_again(money: int) -> bool:
    while True:
        answer = input("PLAY AGAIN? Y/N ")
        try:
            again = should_continue(answer, money)
        except ValueError:
            continue
        if not again:
            print("Insufficient fund!" if money <= 0 else "THANK YOU FOR PLAYING!")
        return again


def _show_hand(title: str, hand: Hand) -> None:
    print(_WIDE_RULE)
    print(f"      = {title}  =")
    print(_WIDE_RULE)
    print(format_hand(hand))


def main(argv: Sequence[str] | None = None) -> int:
    """Play rounds interactively until the player stops or runs out of money."""
    parser = argparse.ArgumentParser(prog="dsakit-casino", description="Banker or player card game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the card draws")
    parser.add_argument("--money", type=int, default=STARTING_MONEY, help="starting balance")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    money = args.money
    try:
        print(_WIDE_RULE)
        print("To Start, please enter your card")
        name = input("Enter your name: ")
        print(f"\nGood evening, {name}")
        print(_WIDE_RULE + "\n")
        print("WELCOME TO THE CASINO")
        print("=" * 33)
        while True:
            print(f"Current balance, PHP {money}")
            choice = _ask_side()
            bet = _ask_bet(money)
            banker = draw_hand(rng)
            _show_hand("BANKER'S CARD", banker)
            print()
            player = draw_hand(rng)
            _show_hand("PLAYER'S CARD", player)
            winner = decide_winner(banker.total, player.total)
            prize = payout(winner, choice, bet)
            print("\n" + _RESULT_RULE)
            print(_WIN_TEXT[winner] + _verdict(winner, choice))
            print(f"COIN {prize}")
            money += prize
            print(f"Current Money, COIN {money}\n")
            if not _ask_again(money):
                return 0
    except EOFError:
        print()
        return 1