"""
ParameterHolder — a flat store of named parameters.

Presence is tracked by key, not by value. A parameter stored as None is
still set: get_parameter() returns None for it rather than the caller's
default, and has_parameter() reports True.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, Optional, TypeVar

from .errors import normalize_items

logger = logging.getLogger(__name__)

V = TypeVar("V")


class ParameterHolder(Generic[V]):
    """
    Holds parameters of a single value type keyed by name.

    The initial parameters are copied, so later changes to the caller's
    mapping do not reach the holder (and vice versa).
    """

    def __init__(self, initial_parameters: Optional[Mapping[str, V]] = None):
        self._parameters: dict[str, V] = dict(initial_parameters or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parameters!r})"

    # =========================================================================
    # READ
    # =========================================================================

    def get_parameter(self, name: str, default: Optional[V] = None) -> Optional[V]:
        """
        Return the named parameter, or ``default`` if it is not set.

        A parameter set to None returns None, not ``default``.
        """
        if name in self._parameters:
            return self._parameters[name]
        return default

    @property
    def parameter_names(self) -> set[str]:
        """Snapshot of the parameter names."""
        return set(self._parameters)

    @property
    def parameters(self) -> dict[str, V]:
        """Shallow copy of all parameters."""
        return dict(self._parameters)

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    # =========================================================================
    # WRITE
    # =========================================================================

    def set_parameter(self, name: str, value: V) -> None:
        self._parameters[name] = value

    def set_parameters(self, parameters: Any = None, **kwargs: V) -> None:
        """
        Merge parameters into the holder. Incoming values win on conflict.

        Accepts a mapping, an iterable of (name, value) pairs, and/or
        keyword arguments. None values are stored, not treated as removals.

        Raises:
            MergeSourceError: If ``parameters`` is not a mapping or pair iterable
        """
        self._parameters.update(normalize_items(parameters, kwargs))

    def remove_parameter(self, name: str) -> Optional[V]:
        """
        Remove the named parameter and return its value.

        Returns None if the parameter was not set.
        """
        return self._parameters.pop(name, None)

    def clear_parameters(self) -> None:
        logger.debug("Clearing %d parameters", len(self._parameters))
        self._parameters.clear()
