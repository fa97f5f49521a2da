"""Gallery configuration read from the environment."""
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Configuration
APP_DIR = Path(__file__).resolve().parent
DEFAULT_THUMB_DIRNAME = "thumbnails"
DEFAULT_TITLE = "Image Gallery"


@dataclass(frozen=True)
class Settings:
    root_dir: Path
    thumb_dirname: str = DEFAULT_THUMB_DIRNAME
    archive_dir: Optional[Path] = None
    title: str = DEFAULT_TITLE
    tip_url: Optional[str] = None

    @property
    def thumb_dir(self) -> Path:
        return self.root_dir / self.thumb_dirname


def get_setting(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get a setting value by key, e.g. ``root`` reads ``GALLERY_ROOT``."""
    value = os.environ.get(f"GALLERY_{key.upper()}", "").strip()
    return value or default


def get_settings() -> Settings:
    """Build the settings for one request.

    Values are re-read from the environment on every call; the result is
    immutable and never shared between requests.
    """
    archive_dir = get_setting("archive_dir")
    return Settings(
        root_dir=Path(os.path.abspath(get_setting("root", os.getcwd()))),
        thumb_dirname=get_setting("thumb_dirname", DEFAULT_THUMB_DIRNAME),
        archive_dir=Path(archive_dir) if archive_dir else Path(tempfile.gettempdir()),
        title=get_setting("title", DEFAULT_TITLE),
        tip_url=get_setting("tip_url"),
    )
