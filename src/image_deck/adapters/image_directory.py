"""Filesystem-backed image listing."""

import mimetypes
from dataclasses import dataclass
from pathlib import Path


def is_image_name(filename: str) -> bool:
    """Return True when the file name maps to an ``image/*`` media type."""
    media_type, _ = mimetypes.guess_type(filename, strict=False)
    return bool(media_type and media_type.startswith("image/"))


@dataclass
class DirectoryImageSource:
    """Lists image files in a directory, re-reading it on every call."""

    directory: Path

    def list_images(self) -> list[str]:
        """Return sorted image file names; empty when the directory is missing."""
        if not self.directory.is_dir():
            return []
        return sorted(
            entry.name
            for entry in self.directory.iterdir()
            if entry.is_file() and is_image_name(entry.name)
        )
