"""Value types for the gallery."""
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImageEntry:
    """One image file in the gallery root, identified by its filename."""
    name: str
    extension: str

    @classmethod
    def from_name(cls, name: str) -> "ImageEntry":
        return cls(name=name, extension=extension_of(name))


@dataclass(frozen=True)
class ResolvedPath:
    """A user supplied filename that has been checked against the root."""
    requested_name: str
    safe_name: str
    absolute_path: Path


@dataclass(frozen=True)
class Neighbors:
    previous: str
    next: str


@dataclass(frozen=True)
class ImageMetadata:
    """Header data of an image file."""
    width_px: int
    height_px: int
    byte_size: int
    mime_type: str

    @property
    def dimensions(self) -> str:
        return f"{self.width_px}x{self.height_px}"

    @property
    def size_kb(self) -> str:
        return f"{self.byte_size / 1024:,.2f} KB"


def extension_of(name: str) -> str:
    """Lowercased text after the last dot; ``.png`` counts as a png."""
    _, dot, ext = name.rpartition(".")
    return ext.lower() if dot else ""
