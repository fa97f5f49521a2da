"""Previous/next navigation over the image index."""
from typing import Sequence

from errors import NotFound
from models import ImageEntry, Neighbors


def neighbors(entries: Sequence[ImageEntry], current: str) -> Neighbors:
    """Previous and next names around ``current``, wrapping at both ends.

    Raises NotFound when ``current`` is not in ``entries``.
    """
    names = [entry.name for entry in entries]
    try:
        index = names.index(current)
    except ValueError:
        raise NotFound(f"Image not in index: {current!r}") from None
    # the modulo also covers the single entry case
    return Neighbors(
        previous=names[index - 1],
        next=names[(index + 1) % len(names)],
    )
