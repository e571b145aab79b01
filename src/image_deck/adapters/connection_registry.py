"""Registry of connected client sockets."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import uuid4

logger = logging.getLogger(__name__)


class ClientSocket(Protocol):
    """The part of a WebSocket the registry needs."""

    async def send_json(self, data: object) -> None:
        """Send a JSON-encodable message to the client."""

    async def close(self, code: int = 1000) -> None:
        """Close the connection."""


@dataclass
class ConnectionRegistry:
    """Tracks active client sockets by id and delivers messages to them.

    Delivery is fire-and-forget: a socket that fails to send, or does not
    accept a message within ``send_timeout`` seconds, is logged and dropped,
    and the remaining deliveries carry on. Senders hold the session lock, so
    the timeout bounds how long one stalled client can delay everyone else.
    """

    send_timeout: float = 5.0
    _sockets: dict[str, ClientSocket] = field(
        default_factory=dict, init=False, repr=False
    )

    def register(self, socket: ClientSocket) -> str:
        """Add a socket and return its new client id."""
        client_id = uuid4().hex
        self._sockets[client_id] = socket
        logger.info("Client %s connected (%d total)", client_id, self.count())
        return client_id

    def unregister(self, client_id: str) -> None:
        if self._sockets.pop(client_id, None) is not None:
            logger.info("Client %s disconnected (%d total)", client_id, self.count())

    def count(self) -> int:
        return len(self._sockets)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._sockets

    async def send(self, client_id: str, message: dict[str, object]) -> None:
        """Send a private message; unknown ids are ignored."""
        socket = self._sockets.get(client_id)
        if socket is None:
            return
        await self._deliver(client_id, socket, message)

    async def broadcast(self, message: dict[str, object]) -> None:
        """Send a message to every registered socket."""
        for client_id, socket in list(self._sockets.items()):
            await self._deliver(client_id, socket, message)

    async def close_all(self) -> None:
        """Close and forget every socket."""
        sockets = list(self._sockets.items())
        self._sockets.clear()
        for client_id, socket in sockets:
            try:
                await socket.close()
            except Exception:
                logger.warning("Failed to close client %s", client_id, exc_info=True)

    async def _deliver(
        self, client_id: str, socket: ClientSocket, message: dict[str, object]
    ) -> None:
        try:
            await asyncio.wait_for(socket.send_json(message), self.send_timeout)
        except Exception:
            logger.warning(
                "Dropping client %s after failed send of %s",
                client_id,
                message.get("event"),
                exc_info=True,
            )
            self.unregister(client_id)
