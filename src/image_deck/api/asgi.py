"""ASGI entrypoint for the image deck server."""

from image_deck.api.app import create_app
from image_deck.containers import build_container

app = create_app(build_container())
