"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from image_deck.api.display import router as display_router
from image_deck.api.images import router as images_router
from image_deck.api.socket_models import ClientMessage
from image_deck.app_logging import configure_logging
from image_deck.containers import AppContainer

UNRECOGNISED_MESSAGE = "Unrecognised message. Send reset-game or request-next."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Serving %s on port %d",
            container.settings.public_dir,
            container.settings.port,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(display_router)
    app.include_router(images_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.websocket("/socket")
    async def socket_endpoint(websocket: WebSocket) -> None:
        """Event channel shared by the host and display clients."""
        broadcaster = websocket.app.state.container.broadcaster
        await websocket.accept()
        client_id = await broadcaster.connect(websocket)
        try:
            while True:
                frame = await websocket.receive()
                if frame["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(frame.get("code", 1000))
                message = _parse_frame(frame)
                if message is None:
                    logger.info("Ignoring malformed frame from %s", client_id)
                    await broadcaster.send_error(client_id, UNRECOGNISED_MESSAGE)
                    continue
                await broadcaster.handle(client_id, message.event)
        except WebSocketDisconnect:
            logger.debug("Socket closed by client %s", client_id)
        finally:
            broadcaster.disconnect(client_id)

    public_dir = container.settings.public_dir
    if public_dir.is_dir():
        # Mounted last so API routes and the landing page take precedence.
        app.mount("/", StaticFiles(directory=public_dir), name="public")
    else:
        logger.warning(
            "Public directory %s not found, static files disabled", public_dir
        )

    return app


def _parse_frame(frame: dict[str, object]) -> ClientMessage | None:
    """Return the command in a received frame, or None if it is not one.

    Commands travel as JSON text frames, so binary frames never parse.
    """
    raw = frame.get("text")
    if not isinstance(raw, str):
        return None
    try:
        return ClientMessage.model_validate_json(raw)
    except ValidationError:
        return None
