"""Klondike-style solitaire with single-card moves and no stock recycling."""

from __future__ import annotations

import random
from dataclasses import dataclass

TABLEAU_COUNT = 7
FOUNDATION_COUNT = 4

_RANKS = ("?", "A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
_SUITS = ("H", "D", "C", "S")


def is_red(suit: int) -> bool:
    """Hearts (0) and diamonds (1) are red."""
    return suit in (0, 1)


def rank_text(rank: int) -> str:
    return _RANKS[rank] if 0 <= rank <= 13 else "?"


def suit_symbol(suit: int) -> str:
    return _SUITS[suit] if 0 <= suit < 4 else "?"


@dataclass(frozen=True)
class Card:
    """A card; rank 0 stands for no card."""

    rank: int = 0
    suit: int = 0

    def label(self) -> str:
        return rank_text(self.rank) + suit_symbol(self.suit)


class Solitaire:
    """Tableau, foundations, stock and waste of one game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.new_game()

    def new_game(self) -> None:
        """Shuffle a fresh deck and deal it."""
        deck = [Card(rank, suit) for suit in range(4) for rank in range(1, 14)]
        for i in range(len(deck) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            deck[i], deck[j] = deck[j], deck[i]
        cards = iter(deck)
        self.tableau = [[next(cards) for _ in range(column + 1)] for column in range(TABLEAU_COUNT)]
        self.foundation = [Card() for _ in range(FOUNDATION_COUNT)]
        self.stock = list(cards)
        self.waste: list[Card] = []
        self.selected_column = 0
        self.won = False
        self.lost = False
        self.update_end_state()

    @property
    def over(self) -> bool:
        return self.won or self.lost

    def can_move_to_tableau(self, card: Card, column: int) -> bool:
        if not 0 <= column < TABLEAU_COUNT:
            return False
        pile = self.tableau[column]
        if not pile:
            return card.rank == 13
        target = pile[-1]
        return card.rank + 1 == target.rank and is_red(card.suit) != is_red(target.suit)

    def can_move_to_foundation(self, card: Card) -> bool:
        if card.rank == 0:
            return False
        top = self.foundation[card.suit]
        return (top.rank == 0 and card.rank == 1) or top.rank + 1 == card.rank

    def auto_move(self) -> bool:
        """Move one card from the waste or a tableau top to a foundation."""
        if self.waste and self.can_move_to_foundation(self.waste[-1]):
            card = self.waste.pop()
            self.foundation[card.suit] = card
            return True
        for pile in self.tableau:
            if pile and self.can_move_to_foundation(pile[-1]):
                card = pile.pop()
                self.foundation[card.suit] = card
                return True
        return False

    def auto_move_all(self) -> None:
        """Move cards to the foundations for as long as any can go."""
        if self.over:
            return
        while self.auto_move():
            pass
        self.update_end_state()

    def draw(self) -> bool:
        """Turn the top stock card onto the waste; False when the stock is empty."""
        if self.over or not self.stock:
            return False
        self.waste.append(self.stock.pop())
        return True

    def select_left(self) -> None:
        if not self.over:
            self.selected_column = (self.selected_column - 1) % TABLEAU_COUNT

    def select_right(self) -> None:
        if not self.over:
            self.selected_column = (self.selected_column + 1) % TABLEAU_COUNT

    def play_selected(self) -> bool:
        """Move the top card of the selected column to a foundation or another column.

        On a finished game this deals a new one instead. Returns whether a card moved.
        """
        if self.over:
            self.new_game()
            return False
        pile = self.tableau[self.selected_column]
        if not pile:
            return False
        card = pile[-1]
        if self.can_move_to_foundation(card):
            self.foundation[card.suit] = card
            pile.pop()
            self.update_end_state()
            return True
        for column in range(TABLEAU_COUNT):
            if column != self.selected_column and self.can_move_to_tableau(card, column):
                self.tableau[column].append(card)
                pile.pop()
                self.update_end_state()
                return True
        return False

    def _any_move_left(self) -> bool:
        for i, pile in enumerate(self.tableau):
            if not pile:
                continue
            card = pile[-1]
            if self.can_move_to_foundation(card):
                return True
            if any(j != i and self.can_move_to_tableau(card, j) for j in range(TABLEAU_COUNT)):
                return True
        return False

    def update_end_state(self) -> None:
        """Work out whether the game is won or has no moves left."""
        self.won = all(card.rank == 13 for card in self.foundation)
        if self.won:
            self.lost = False
        elif not self.stock and not self.waste:
            self.lost = not self._any_move_left()
        else:
            self.lost = False