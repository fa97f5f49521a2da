"""Image directory scanning and image header reading."""
import logging
import os
from pathlib import Path
from typing import Iterable, List

from PIL import Image as PILImage, UnidentifiedImageError

from errors import NotAnImage
from models import ImageEntry, ImageMetadata, extension_of
from settings import DEFAULT_THUMB_DIRNAME

logger = logging.getLogger(__name__)

# Configuration
ALLOWED_EXTS = {"jpg", "jpeg", "png", "gif", "bmp", "webp", "svg"}


def is_image_name(name: str) -> bool:
    """Whether a filename carries one of the recognized image extensions."""
    return extension_of(name) in ALLOWED_EXTS


def iter_image_files(root: Path, thumb_dirname: str = DEFAULT_THUMB_DIRNAME) -> Iterable[str]:
    """Iterate through the image files directly inside root, in listing order."""
    with os.scandir(root) as it:
        for dirent in it:
            if dirent.name in (".", "..", thumb_dirname):
                continue
            if not is_image_name(dirent.name):
                continue
            try:
                if not dirent.is_file():
                    continue
            except OSError:
                # gone between listing and stat
                continue
            yield dirent.name


def list_images(root: Path, thumb_dirname: str = DEFAULT_THUMB_DIRNAME) -> List[ImageEntry]:
    """Index the images in root. A fresh snapshot is taken on every call."""
    return [ImageEntry.from_name(name) for name in iter_image_files(root, thumb_dirname)]


def select_display_path(entry: ImageEntry, thumb_dir: Path, root: Path) -> Path:
    """Path to show in the listing: the thumbnail when present, else the original."""
    thumb = Path(thumb_dir) / entry.name
    if thumb.is_file():
        return thumb
    return Path(root) / entry.name


def read_image_meta(path: Path) -> ImageMetadata:
    """Read dimensions, byte size and MIME type of an image.

    Only the header is parsed; the MIME type comes from the detected format,
    not the file extension.
    """
    try:
        byte_size = os.stat(path).st_size
        with PILImage.open(path) as im:
            width, height = im.size
            mime_type = im.get_format_mimetype()
    except (UnidentifiedImageError, PILImage.DecompressionBombError) as e:
        raise NotAnImage(f"Not a decodable image: {path}") from e
    except (OSError, ValueError) as e:
        raise NotAnImage(f"Cannot read image {path}: {e}") from e
    if not mime_type:
        raise NotAnImage(f"Unknown image format: {path}")
    return ImageMetadata(
        width_px=width, height_px=height, byte_size=byte_size, mime_type=mime_type
    )
