"""Pydantic models for socket frames and listing responses."""

from pydantic import BaseModel, ConfigDict, Field

from image_deck.domain.events import Command


class ClientMessage(BaseModel):
    """Inbound frame sent by a host or display client."""

    event: Command


class ImageListingResponse(BaseModel):
    """Response body for the image listing endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    count: int
    images: list[str]
    deck_remaining: int = Field(alias="deckRemaining")
