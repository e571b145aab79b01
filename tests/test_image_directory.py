"""Tests for the directory image source."""

from pathlib import Path

from image_deck.adapters.image_directory import DirectoryImageSource, is_image_name


def test_lists_only_images_sorted(public_dir: Path) -> None:
    source = DirectoryImageSource(public_dir / "images")

    assert source.list_images() == ["a.png", "b.jpg"]


def test_missing_directory_is_empty(tmp_path: Path) -> None:
    source = DirectoryImageSource(tmp_path / "missing")

    assert source.list_images() == []


def test_rescans_on_every_call(public_dir: Path) -> None:
    source = DirectoryImageSource(public_dir / "images")
    source.list_images()

    (public_dir / "images" / "c.gif").write_bytes(b"GIF89a")

    assert source.list_images() == ["a.png", "b.jpg", "c.gif"]


def test_skips_directories(public_dir: Path) -> None:
    (public_dir / "images" / "album.png").mkdir()
    source = DirectoryImageSource(public_dir / "images")

    assert "album.png" not in source.list_images()


def test_is_image_name() -> None:
    assert is_image_name("photo.JPG")
    assert is_image_name("drawing.svg")
    assert not is_image_name("notes.txt")
    assert not is_image_name("README")
