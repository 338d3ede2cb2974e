"""
AttributeHolder — parameters plus namespaced attributes.

Attributes live in namespaces, each its own flat mapping of name to
value. One namespace is the default; it is used whenever no namespace
(or an empty one) is given, and it is never removed, only emptied.

Namespace lifecycle:
    created   — lazily, by set_attribute() / set_attributes()
    emptied   — remove_attribute() never drops the namespace itself
    removed   — remove_attribute_namespace() / clear_attributes()

The parameter facet is a ParameterHolder owned by the AttributeHolder;
the parameter methods delegate to it unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, Optional, TypeVar

from .errors import normalize_items
from .parameters import ParameterHolder

logger = logging.getLogger(__name__)

P = TypeVar("P")
A = TypeVar("A")


DEFAULT_NAMESPACE = "com.exzyle"


class AttributeHolder(Generic[P, A]):
    """
    Holds parameters of type P and namespaced attributes of type A.

    Subclasses may set DEFAULT_NAMESPACE to use a different default
    namespace.
    """

    DEFAULT_NAMESPACE = DEFAULT_NAMESPACE

    def __init__(self, initial_parameters: Optional[Mapping[str, P]] = None):
        self._parameter_holder: ParameterHolder[P] = ParameterHolder(initial_parameters)
        self._attribute_map: dict[str, dict[str, A]] = {self.default_namespace: {}}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"parameters={self._parameter_holder.parameters!r}, "
            f"attributes={self._attribute_map!r})"
        )

    @property
    def default_namespace(self) -> str:
        return self.DEFAULT_NAMESPACE

    def _resolve(self, namespace: Optional[str]) -> str:
        """Map None and "" to the default namespace."""
        return namespace or self.default_namespace

    # =========================================================================
    # PARAMETERS (delegated)
    # =========================================================================

    def get_parameter(self, name: str, default: Optional[P] = None) -> Optional[P]:
        return self._parameter_holder.get_parameter(name, default)

    @property
    def parameter_names(self) -> set[str]:
        return self._parameter_holder.parameter_names

    @property
    def parameters(self) -> dict[str, P]:
        return self._parameter_holder.parameters

    def has_parameter(self, name: str) -> bool:
        return self._parameter_holder.has_parameter(name)

    def set_parameter(self, name: str, value: P) -> None:
        self._parameter_holder.set_parameter(name, value)

    def set_parameters(self, parameters: Any = None, **kwargs: P) -> None:
        self._parameter_holder.set_parameters(parameters, **kwargs)

    def remove_parameter(self, name: str) -> Optional[P]:
        return self._parameter_holder.remove_parameter(name)

    def clear_parameters(self) -> None:
        self._parameter_holder.clear_parameters()

    # =========================================================================
    # NAMESPACES
    # =========================================================================

    @property
    def namespaces(self) -> list[str]:
        """All namespace names. Always includes the default namespace."""
        return list(self._attribute_map)

    def has_namespace(self, namespace: Optional[str]) -> bool:
        return self._resolve(namespace) in self._attribute_map

    def _namespace_for_write(self, namespace: Optional[str]) -> dict[str, A]:
        """Return the namespace's mapping, creating the namespace if needed."""
        namespace = self._resolve(namespace)
        if namespace not in self._attribute_map:
            logger.debug("Creating attribute namespace %r", namespace)
            self._attribute_map[namespace] = {}
        return self._attribute_map[namespace]

    def remove_attribute_namespace(self, namespace: Optional[str]) -> dict[str, A]:
        """
        Remove a namespace and return a copy of its attributes.

        The default namespace is emptied instead of removed. A namespace
        that does not exist yields an empty dict and is not created.
        """
        namespace = self._resolve(namespace)
        if namespace not in self._attribute_map:
            return {}

        removed = dict(self._attribute_map[namespace])
        if namespace == self.default_namespace:
            logger.debug("Resetting default namespace %r (%d attributes)", namespace, len(removed))
            self._attribute_map[namespace] = {}
        else:
            logger.debug("Removing attribute namespace %r (%d attributes)", namespace, len(removed))
            del self._attribute_map[namespace]
        return removed

    def clear_attributes(self) -> None:
        """Drop every namespace, leaving only an empty default namespace."""
        logger.debug("Clearing %d attribute namespaces", len(self._attribute_map))
        self._attribute_map = {self.default_namespace: {}}

    # =========================================================================
    # ATTRIBUTES
    # =========================================================================

    def get_attributes(self, namespace: Optional[str] = None) -> dict[str, A]:
        """Shallow copy of a namespace's attributes; empty if it does not exist."""
        return dict(self._attribute_map.get(self._resolve(namespace), {}))

    def get_attribute_names(self, namespace: Optional[str] = None) -> list[str]:
        return list(self._attribute_map.get(self._resolve(namespace), {}))

    def get_attribute(
        self,
        name: str,
        namespace: Optional[str] = None,
        default: Optional[A] = None,
    ) -> Optional[A]:
        """
        Return an attribute, or ``default`` if it is not set.

        An attribute set to None returns None, not ``default``.
        """
        attributes = self._attribute_map.get(self._resolve(namespace), {})
        if name in attributes:
            return attributes[name]
        return default

    def has_attribute(self, name: str, namespace: Optional[str] = None) -> bool:
        return name in self._attribute_map.get(self._resolve(namespace), {})

    def set_attribute(self, name: str, value: A, namespace: Optional[str] = None) -> None:
        self._namespace_for_write(namespace)[name] = value

    def set_attributes(
        self,
        attributes: Any = None,
        namespace: Optional[str] = None,
        **kwargs: A,
    ) -> None:
        """
        Merge attributes into a namespace, creating it if needed.

        Incoming values win on conflict. Accepts a mapping, an iterable
        of (name, value) pairs, and/or keyword arguments. The namespace is
        only created once the source has been read successfully.

        Raises:
            MergeSourceError: If ``attributes`` is not a mapping or pair iterable
        """
        items = normalize_items(attributes, kwargs)
        self._namespace_for_write(namespace).update(items)

    def remove_attribute(self, name: str, namespace: Optional[str] = None) -> Optional[A]:
        """
        Remove an attribute and return its value, or None if it was not set.

        The namespace stays in place even when this empties it.
        """
        attributes = self._attribute_map.get(self._resolve(namespace))
        if attributes is None:
            return None
        return attributes.pop(name, None)
