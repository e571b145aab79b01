"""Informational image listing endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from image_deck.api.socket_models import ImageListingResponse

if TYPE_CHECKING:
    from image_deck.containers import AppContainer

router = APIRouter(prefix="/api", tags=["images"])


@router.get("/images", response_model=ImageListingResponse)
async def list_images(request: Request) -> ImageListingResponse:
    """Return a fresh scan of the images directory.

    The listing is read-only: it neither rebuilds the deck nor changes the
    baseline used to detect a changed image set.
    """
    container: AppContainer = request.app.state.container
    listing = container.session_service.list_images()
    return ImageListingResponse(
        count=listing.count,
        images=listing.images,
        deck_remaining=listing.deck_remaining,
    )
