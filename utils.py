"""Filename validation for user supplied image names."""
import logging
import os
from pathlib import Path

from errors import InvalidPath
from models import ResolvedPath

logger = logging.getLogger(__name__)


def resolve_under_root(root: Path, candidate: Path) -> Path:
    """Resolve a path ensuring it's under the root directory.

    The check is lexical: ``..`` components are collapsed but symlinks are
    not followed.
    """
    root = Path(os.path.abspath(root))
    real = Path(os.path.abspath(candidate))
    if root not in real.parents:
        raise InvalidPath(f"Path is outside root: {candidate}")
    return real


def basename(raw_name: str) -> str:
    """Final path segment of ``raw_name``, split on the platform separators."""
    if os.altsep:
        raw_name = raw_name.replace(os.altsep, os.sep)
    return raw_name.rstrip(os.sep).rsplit(os.sep, 1)[-1]


def resolve_image_name(raw_name: str, root: Path) -> ResolvedPath:
    """Turn an untrusted filename into a path directly inside ``root``.

    Raises InvalidPath for empty names, ``.``/``..`` and anything that would
    land outside the root. The filesystem is not consulted.
    """
    if raw_name is None:
        raise InvalidPath("Missing filename")
    safe_name = basename(raw_name)
    if safe_name in ("", ".", "..") or "\x00" in safe_name:
        logger.debug("Rejected filename %r", raw_name)
        raise InvalidPath(f"Invalid filename: {raw_name!r}")

    absolute = resolve_under_root(root, Path(root) / safe_name)
    if absolute.parent != Path(os.path.abspath(root)):
        raise InvalidPath(f"Path is not a direct child of root: {raw_name!r}")
    return ResolvedPath(
        requested_name=raw_name, safe_name=safe_name, absolute_path=absolute
    )
