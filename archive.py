"""Zip archive of every gallery image, built per download request."""
import logging
import os
import tempfile
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Sequence

from errors import ArchiveCreationFailed
from models import ImageEntry

logger = logging.getLogger(__name__)

CHUNK_SIZE = 256 * 1024


def archive_name(now: Optional[datetime] = None) -> str:
    """Download name, e.g. ``images_2024-05-01_13-45-09.zip``."""
    now = now or datetime.now()
    return f"images_{now.strftime('%Y-%m-%d_%H-%M-%S')}.zip"


class ArchiveJob:
    """A temporary zip file that lives for one download response.

    The file is removed once its bytes have been streamed, or when
    ``cleanup`` is called, whichever happens first.
    """

    def __init__(self, path: Path, download_name: str, members: int):
        self.path = path
        self.download_name = download_name
        self.members = members
        self.size = path.stat().st_size

    def iter_bytes(self, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
        try:
            with self.path.open("rb") as f:
                while True:
                    b = f.read(chunk_size)
                    if not b:
                        break
                    yield b
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        logger.debug("Removed temporary archive %s", self.path)

    def __enter__(self) -> "ArchiveJob":
        return self

    def __exit__(self, *exc) -> None:
        self.cleanup()


def build_archive(
    entries: Sequence[ImageEntry],
    source_dir: Path,
    archive_dir: Optional[Path] = None,
) -> ArchiveJob:
    """Write every entry of ``source_dir`` into a new temporary zip.

    Entries whose file disappeared since indexing are skipped. Raises
    ArchiveCreationFailed when the zip cannot be created or written; no
    temporary file is left behind in that case.
    """
    download_name = archive_name()
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f"{Path(download_name).stem}_",
            suffix=".zip",
            dir=str(archive_dir) if archive_dir else None,
        )
    except OSError as e:
        logger.exception("Cannot create archive in %s", archive_dir)
        raise ArchiveCreationFailed(f"Cannot create archive: {e}") from e
    os.close(fd)
    tmp_path = Path(tmp_name)

    members = 0
    try:
        with zipfile.ZipFile(tmp_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for entry in entries:
                source = Path(source_dir) / entry.name
                if not source.is_file():
                    logger.warning("Skipping %s: no longer on disk", entry.name)
                    continue
                try:
                    zf.write(source, arcname=entry.name)
                except FileNotFoundError:
                    logger.warning("Skipping %s: removed while archiving", entry.name)
                    continue
                members += 1
        job = ArchiveJob(tmp_path, download_name, members)
    except (OSError, zipfile.BadZipFile) as e:
        logger.exception("Failed to build archive %s", tmp_path)
        tmp_path.unlink(missing_ok=True)
        raise ArchiveCreationFailed(f"Failed to build archive: {e}") from e

    logger.info("Built %s with %d images (%d bytes)", download_name, members, job.size)
    return job
