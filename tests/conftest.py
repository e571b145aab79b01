"""Shared test fixtures."""

import random
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from image_deck.adapters.connection_registry import ConnectionRegistry
from image_deck.config import Settings
from image_deck.containers import AppContainer, build_container
from image_deck.services.broadcaster import SessionBroadcaster
from image_deck.services.session import ImageSource, SessionService


@dataclass
class FakeImageSource(ImageSource):
    """In-memory image source whose listing tests can change."""

    images: list[str] = field(default_factory=list)
    scans: int = 0

    def list_images(self) -> list[str]:
        self.scans += 1
        return list(self.images)


@dataclass
class FakeSocket:
    """Fake client socket that records every message sent to it."""

    messages: list[dict[str, object]] = field(default_factory=list)
    closed: bool = False
    fail: bool = False

    async def send_json(self, data: object) -> None:
        if self.fail:
            raise RuntimeError("connection reset")
        self.messages.append(data)

    async def close(self, code: int = 1000) -> None:
        self.closed = True

    def events(self) -> list[str]:
        return [str(message["event"]) for message in self.messages]


def make_service(images: list[str], seed: int = 7) -> SessionService:
    return SessionService.create(FakeImageSource(images), rng=random.Random(seed))


def image_names(count: int) -> list[str]:
    return [f"image-{index:02d}.png" for index in range(count)]


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    images_dir = tmp_path / "public" / "images"
    images_dir.mkdir(parents=True)
    for name in ("a.png", "b.jpg"):
        (images_dir / name).write_bytes(b"fake-image-bytes")
    (images_dir / "notes.txt").write_text("not an image")
    return tmp_path / "public"


@pytest.fixture
def settings(public_dir: Path) -> Settings:
    return Settings(public_dir=public_dir, port=3000)


@pytest.fixture
def image_source() -> FakeImageSource:
    return FakeImageSource(["a.png", "b.jpg"])


@pytest.fixture
def registry() -> ConnectionRegistry:
    return ConnectionRegistry()


@pytest.fixture
def broadcaster(
    image_source: FakeImageSource, registry: ConnectionRegistry
) -> SessionBroadcaster:
    return SessionBroadcaster(
        session_service=SessionService.create(image_source, rng=random.Random(3)),
        registry=registry,
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
