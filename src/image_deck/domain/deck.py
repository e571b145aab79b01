"""Shuffled serving order of images."""

import random
from collections.abc import Sequence
from dataclasses import dataclass


class DeckExhaustedError(RuntimeError):
    """Raised when a card is requested from an empty deck."""


@dataclass
class Deck:
    """A shuffled permutation of an image listing with a serving cursor.

    ``source`` keeps the listing the deck was built from so later scans can
    be compared against it.
    """

    cards: tuple[str, ...] = ()
    source: tuple[str, ...] = ()
    cursor: int = 0

    @classmethod
    def build(cls, images: Sequence[str], rng: random.Random | None = None) -> "Deck":
        """Return a freshly shuffled deck over ``images`` with the cursor at 0."""
        cards = list(images)
        # Random.shuffle is an in-place Fisher-Yates pass from the last index down.
        (rng or random.Random()).shuffle(cards)
        return cls(cards=tuple(cards), source=tuple(images), cursor=0)

    def __len__(self) -> int:
        return len(self.cards)

    def remaining(self) -> int:
        """Number of cards not yet served."""
        return max(0, len(self.cards) - self.cursor)

    def next(self) -> str:
        """Serve the card under the cursor and advance past it."""
        if self.cursor >= len(self.cards):
            raise DeckExhaustedError(f"deck of {len(self.cards)} images is exhausted")
        card = self.cards[self.cursor]
        self.cursor += 1
        return card

    def differs_from(self, images: Sequence[str]) -> bool:
        """Return True when ``images`` is not the listing this deck was built from.

        Only the length and the presence of each new name in the old listing
        are compared.
        """
        if len(images) != len(self.source):
            return True
        known = set(self.source)
        return any(name not in known for name in images)
