"""
Merge source handling for the holders.

Holders never raise for missing keys or namespaces. The one failure they
report is a caller handing a merge a value that is not a set of
key/value pairs.

Accepted merge sources:
    Mapping          — dict or any collections.abc.Mapping
    items() object   — anything exposing an items() view
    pair iterable    — iterable of (key, value) 2-tuples
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional


class MergeSourceError(TypeError):
    """Raised when a merge source cannot be read as key/value pairs."""

    def __init__(self, source: Any, reason: Optional[str] = None):
        self.source_type = type(source).__name__
        self.reason = reason or "expected a mapping or an iterable of (key, value) pairs"
        super().__init__(f"[{self.source_type}] {self.reason}")


def normalize_items(
    source: Any = None,
    extra: Optional[Mapping[str, Any]] = None,
) -> dict[str, Any]:
    """
    Flatten a merge source and keyword extras into a new dict.

    Pairs keep source order, then ``extra`` order; later pairs win. The
    whole source is read and every key hashed before anything is
    returned, so a bad pair halfway through leaves the caller's store
    untouched.

    Raises:
        MergeSourceError: If ``source`` is not a mapping or pair iterable,
            or holds a malformed pair or an unhashable key
    """
    if source is None:
        pairs: Iterable[Any] = ()
    elif isinstance(source, Mapping) or hasattr(source, "items"):
        pairs = source.items()
    elif isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
        raise MergeSourceError(source)
    else:
        pairs = source

    items: dict[str, Any] = {}
    for index, pair in enumerate(pairs):
        try:
            key, value = pair
        except (TypeError, ValueError):
            raise MergeSourceError(
                source,
                f"item {index} is not a (key, value) pair",
            ) from None
        try:
            items[key] = value
        except TypeError:
            raise MergeSourceError(
                source,
                f"item {index} has an unhashable key of type {type(key).__name__}",
            ) from None

    if extra:
        items.update(extra)

    return items
