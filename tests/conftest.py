"""Shared fixtures: a throwaway gallery folder and a client pointed at it."""
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image

PIL_FORMATS = {"jpg": "JPEG", "jpeg": "JPEG", "png": "PNG", "gif": "GIF", "bmp": "BMP", "webp": "WEBP"}


def write_image(path: Path, size=(40, 30), color=(73, 109, 137), fmt=None) -> Path:
    """Create a small real image; the format follows the extension unless given."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fmt = fmt or PIL_FORMATS[path.suffix.lower().lstrip(".")]
    Image.new("RGB", size, color).save(path, format=fmt)
    return path


@pytest.fixture
def gallery_dir(tmp_path: Path) -> Path:
    """a.jpg, b.png, notes.txt and an empty thumbnails/ folder."""
    root = tmp_path / "gallery"
    root.mkdir()
    write_image(root / "a.jpg", size=(40, 30))
    write_image(root / "b.png", size=(16, 8))
    (root / "notes.txt").write_text("not an image")
    (root / "thumbnails").mkdir()
    return root


@pytest.fixture
def archive_dir(tmp_path: Path) -> Path:
    d = tmp_path / "archives"
    d.mkdir()
    return d


@pytest.fixture
def client(gallery_dir: Path, archive_dir: Path, monkeypatch) -> TestClient:
    monkeypatch.setenv("GALLERY_ROOT", str(gallery_dir))
    monkeypatch.setenv("GALLERY_ARCHIVE_DIR", str(archive_dir))
    monkeypatch.delenv("GALLERY_THUMB_DIRNAME", raising=False)
    monkeypatch.delenv("GALLERY_TIP_URL", raising=False)
    from app import app

    return TestClient(app)
