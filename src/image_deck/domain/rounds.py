"""Round counting for a deck run."""

from dataclasses import dataclass
from typing import ClassVar, Final

FIXED_ROUND_LIMIT: Final = 5


@dataclass
class RoundTracker:
    """Counts served images against the fixed round limit."""

    limit: ClassVar[int] = FIXED_ROUND_LIMIT

    shown: int = 0
    in_progress: bool = False

    def start(self) -> None:
        self.in_progress = True

    def finish(self) -> None:
        self.in_progress = False

    def mark_shown(self) -> None:
        """Count one more served image, opening the run on the first one."""
        self.shown += 1
        self.in_progress = True

    def reset(self) -> None:
        self.shown = 0
        self.in_progress = False

    def is_limit_reached(self) -> bool:
        return self.shown >= self.limit
