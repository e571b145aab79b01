"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from image_deck.adapters.connection_registry import ConnectionRegistry
from image_deck.adapters.image_directory import DirectoryImageSource
from image_deck.config import Settings
from image_deck.services.broadcaster import SessionBroadcaster
from image_deck.services.session import ImageSource, SessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    image_source: ImageSource
    session_service: SessionService
    registry: ConnectionRegistry
    broadcaster: SessionBroadcaster
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, image_source: ImageSource | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    source = image_source or DirectoryImageSource(resolved_settings.images_dir)
    session_service = SessionService.create(source)
    registry = ConnectionRegistry()
    broadcaster = SessionBroadcaster(
        session_service=session_service,
        registry=registry,
    )

    async def close_resources() -> None:
        await registry.close_all()

    return AppContainer(
        settings=resolved_settings,
        image_source=source,
        session_service=session_service,
        registry=registry,
        broadcaster=broadcaster,
        close_resources=close_resources,
    )
