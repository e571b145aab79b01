"""Event payloads exchanged with display clients."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import PurePosixPath
from urllib.parse import quote

# Characters left unescaped in image URLs besides the RFC 3986 unreserved set.
_URL_SAFE = "!*'()"


class EventName(StrEnum):
    """Names of server-to-client events."""

    CONFIG = "config"
    RESET = "reset"
    SHOW_IMAGE = "show-image"
    DECK_FINISHED = "deck-finished"
    GAME_OVER = "game-over"
    ERROR_MSG = "error-msg"


class Command(StrEnum):
    """Names of client-to-server events."""

    RESET_GAME = "reset-game"
    REQUEST_NEXT = "request-next"


@dataclass(frozen=True)
class ConfigSnapshot:
    """Round and deck counters as seen by clients."""

    rounds: int
    shown: int
    in_progress: bool
    deck_remaining: int

    def as_payload(self) -> dict[str, object]:
        return {
            "rounds": self.rounds,
            "shown": self.shown,
            "inProgress": self.in_progress,
            "deckRemaining": self.deck_remaining,
        }


@dataclass(frozen=True)
class ShownImage:
    """An image served to every display."""

    url: str
    name: str
    shown: int
    rounds: int
    deck_remaining: int

    @classmethod
    def for_file(
        cls, filename: str, shown: int, rounds: int, deck_remaining: int
    ) -> "ShownImage":
        """Build the public URL and display name for an image file."""
        return cls(
            url=f"/images/{quote(filename, safe=_URL_SAFE)}",
            name=PurePosixPath(filename).stem,
            shown=shown,
            rounds=rounds,
            deck_remaining=deck_remaining,
        )

    def as_payload(self) -> dict[str, object]:
        return {
            "url": self.url,
            "name": self.name,
            "shown": self.shown,
            "rounds": self.rounds,
            "deckRemaining": self.deck_remaining,
        }


@dataclass(frozen=True)
class OutboundEvent:
    """An event addressed to one client, or to all when ``recipient`` is None."""

    name: EventName
    data: object
    recipient: str | None = None

    @property
    def is_broadcast(self) -> bool:
        return self.recipient is None

    def as_message(self) -> dict[str, object]:
        """Wire envelope sent over the socket."""
        return {"event": str(self.name), "data": self.data}


def notice(message: str) -> dict[str, str]:
    """Payload for reset, deck-finished and game-over events."""
    return {"message": message}
