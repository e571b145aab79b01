"""Delivery of session events to connected clients."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from image_deck.adapters.connection_registry import ClientSocket, ConnectionRegistry
from image_deck.domain.events import Command, EventName, OutboundEvent
from image_deck.services.session import SessionService

logger = logging.getLogger(__name__)


@dataclass
class SessionBroadcaster:
    """Runs client commands against the session one at a time.

    The lock spans both the state change and the sends, so the events of
    two commands never interleave on any client.
    """

    session_service: SessionService
    registry: ConnectionRegistry
    _lock: asyncio.Lock = field(
        default_factory=asyncio.Lock, init=False, repr=False
    )

    async def connect(self, socket: ClientSocket) -> str:
        """Register an accepted socket and send it the current snapshot."""
        async with self._lock:
            client_id = self.registry.register(socket)
            await self._deliver(self.session_service.connect(client_id))
        return client_id

    def disconnect(self, client_id: str) -> None:
        self.registry.unregister(client_id)

    async def handle(self, client_id: str, command: Command) -> None:
        """Dispatch one inbound command from ``client_id``."""
        async with self._lock:
            if command is Command.RESET_GAME:
                logger.info("Reset requested by %s", client_id)
                events = self.session_service.reset_game()
            else:
                events = self.session_service.request_next(client_id)
            await self._deliver(events)

    async def send_error(self, client_id: str, text: str) -> None:
        """Send an ``error-msg`` to one client only."""
        async with self._lock:
            await self._deliver([OutboundEvent(EventName.ERROR_MSG, text, client_id)])

    async def _deliver(self, events: Iterable[OutboundEvent]) -> None:
        for event in events:
            message = event.as_message()
            if event.recipient is None:
                await self.registry.broadcast(message)
            else:
                await self.registry.send(event.recipient, message)
