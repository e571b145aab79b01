"""Deck and round state machine for the shared presentation session."""

import logging
import random
from dataclasses import dataclass, field
from typing import Protocol

from image_deck.domain.deck import Deck
from image_deck.domain.events import (
    ConfigSnapshot,
    EventName,
    OutboundEvent,
    ShownImage,
    notice,
)
from image_deck.domain.rounds import FIXED_ROUND_LIMIT, RoundTracker

logger = logging.getLogger(__name__)

RESET_BY_HOST = "Game reset by organiser"
IMAGE_SET_CHANGED = "Image set changed on server, deck rebuilt. Start again from host."
DECK_FINISHED = "All images shown, deck finished."
LIMIT_REACHED = f"Round limit reached ({FIXED_ROUND_LIMIT})."
LIMIT_REACHED_USE_RESET = (
    f"Round limit reached ({FIXED_ROUND_LIMIT}). Use Reset to start again."
)


class ImageSource(Protocol):
    """Interface for listing the images available to the deck."""

    def list_images(self) -> list[str]:
        """Return the current image identifiers, re-reading the source."""


@dataclass
class GameSession:
    """The one deck and round counter shared by every connected client."""

    deck: Deck = field(default_factory=Deck)
    rounds: RoundTracker = field(default_factory=RoundTracker)

    def snapshot(
        self, *, in_progress: bool | None = None, deck_remaining: int | None = None
    ) -> ConfigSnapshot:
        """Current counters, with optional overrides for forced values."""
        return ConfigSnapshot(
            rounds=self.rounds.limit,
            shown=self.rounds.shown,
            in_progress=(
                self.rounds.in_progress if in_progress is None else in_progress
            ),
            deck_remaining=(
                self.deck.remaining() if deck_remaining is None else deck_remaining
            ),
        )


@dataclass(frozen=True)
class ImageListing:
    """A fresh scan of the image source alongside the deck counter."""

    images: list[str]
    deck_remaining: int

    @property
    def count(self) -> int:
        return len(self.images)


@dataclass
class SessionService:
    """Applies host commands to the session and returns the events to send.

    Every handler mutates state and computes its events synchronously, and
    the returned list is in delivery order.
    """

    image_source: ImageSource
    session: GameSession = field(default_factory=GameSession)
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def create(
        cls, image_source: ImageSource, rng: random.Random | None = None
    ) -> "SessionService":
        """Create a service with a deck built from the current listing."""
        service = cls(image_source=image_source, rng=rng or random.Random())
        service.rebuild(image_source.list_images())
        return service

    def rebuild(self, images: list[str]) -> None:
        """Shuffle a new deck over ``images`` and reset the round counter."""
        self.session.deck = Deck.build(images, self.rng)
        self.session.rounds.reset()
        logger.info("Deck built: %d images", len(self.session.deck))

    def list_images(self) -> ImageListing:
        return ImageListing(
            images=self.image_source.list_images(),
            deck_remaining=self.session.deck.remaining(),
        )

    def connect(self, client_id: str) -> list[OutboundEvent]:
        """Snapshot sent privately to a newly connected client."""
        return [self._config(recipient=client_id)]

    def reset_game(self) -> list[OutboundEvent]:
        """Rescan, reshuffle and tell every display to return to its landing state."""
        self.rebuild(self.image_source.list_images())
        return [
            self._config(),
            OutboundEvent(EventName.RESET, notice(RESET_BY_HOST)),
        ]

    def request_next(self, client_id: str) -> list[OutboundEvent]:
        """Advance the deck by one image on behalf of ``client_id``."""
        session = self.session
        images = self.image_source.list_images()
        if session.deck.differs_from(images):
            logger.warning(
                "Image set changed (%d -> %d images), rebuilding deck",
                len(session.deck.source),
                len(images),
            )
            self.rebuild(images)
            return [
                self._config(),
                OutboundEvent(EventName.RESET, notice(IMAGE_SET_CHANGED)),
                OutboundEvent(EventName.ERROR_MSG, IMAGE_SET_CHANGED, client_id),
            ]

        if session.deck.remaining() == 0:
            return [
                OutboundEvent(
                    EventName.DECK_FINISHED, notice(DECK_FINISHED), client_id
                ),
                self._config(in_progress=False, deck_remaining=0),
            ]

        # The game-over broadcast already cleared in_progress, so only the count
        # can tell that the limit was hit.
        if session.rounds.is_limit_reached():
            logger.info("Advance refused after game over, reset required")
            return [
                OutboundEvent(
                    EventName.GAME_OVER, notice(LIMIT_REACHED_USE_RESET), client_id
                )
            ]

        if not session.rounds.in_progress:
            session.rounds.start()
        filename = session.deck.next()
        session.rounds.mark_shown()
        shown = ShownImage.for_file(
            filename,
            shown=session.rounds.shown,
            rounds=session.rounds.limit,
            deck_remaining=session.deck.remaining(),
        )
        events = [OutboundEvent(EventName.SHOW_IMAGE, shown.as_payload())]

        if session.deck.remaining() == 0:
            session.rounds.finish()
            events += [
                OutboundEvent(EventName.DECK_FINISHED, notice(DECK_FINISHED)),
                self._config(deck_remaining=0),
            ]
        elif session.rounds.is_limit_reached():
            session.rounds.finish()
            events += [
                OutboundEvent(EventName.GAME_OVER, notice(LIMIT_REACHED)),
                self._config(),
            ]
        else:
            events.append(self._config())
        return events

    def _config(
        self,
        recipient: str | None = None,
        *,
        in_progress: bool | None = None,
        deck_remaining: int | None = None,
    ) -> OutboundEvent:
        snapshot = self.session.snapshot(
            in_progress=in_progress, deck_remaining=deck_remaining
        )
        return OutboundEvent(EventName.CONFIG, snapshot.as_payload(), recipient)
