"""Errors raised by the gallery core."""


class GalleryError(Exception):
    """Base class for gallery errors."""


class InvalidPath(GalleryError):
    """Filename is malformed or escapes the gallery root."""


class NotFound(GalleryError):
    """Name is not part of the current image index."""


class NotAnImage(GalleryError):
    """File is missing or cannot be decoded as an image."""


class ArchiveCreationFailed(GalleryError):
    """Zip archive could not be created or written."""
