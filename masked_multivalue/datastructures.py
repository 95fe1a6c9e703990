"""
Ordered multi-value map with masked rendering.

``MaskingMultiValueMap`` stores an ordered list of values per key, in key
insertion order, and can hide the values of selected keys (passwords, tokens
and other credentials) whenever the map is converted to text. It is meant for
request-scoped data such as submitted form fields and is not thread-safe.
"""

from __future__ import annotations

import logging
import reprlib
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, Dict, Hashable, Iterator, List, Optional

logger = logging.getLogger(__name__)

PROTECTED_PLACEHOLDER = "[PROTECTED]"
SELF_REFERENCE_LABEL = "(this map)"


def _int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= 0xFFFFFFFF
    if value & 0x80000000:
        value -= 0x100000000
    return value


def _as_value_list(values: Any) -> List[Any]:
    if isinstance(values, list):
        return values
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise TypeError(
            f"Expected a list of values, got {type(values).__name__}"
        )
    return list(values)


class MaskingMultiValueMap(MutableMapping):
    """
    Insertion-ordered mapping of keys to lists of values.

    Keys registered as masked render as ``[PROTECTED]`` in ``str()`` and
    ``repr()``; their values are never converted to text. The map may contain
    itself as a key or value, in which case it renders as ``(this map)``.

    Masking is metadata only: it does not take part in equality or hashing.

    Examples:
        >>> data = MaskingMultiValueMap(masked_keys={"password"})
        >>> data.add("username", "alice")
        >>> data.add("password", "secret")
        >>> str(data)
        '{username=[alice], password=[PROTECTED]}'
    """

    def __init__(
        self,
        mapping: Optional[Any] = None,
        *,
        masked_keys: Optional[Iterable[Hashable]] = None,
        initial_capacity: Optional[int] = None,
    ):
        """
        Args:
            mapping: Optional key -> list of values source. Pairs are copied,
                the lists themselves are shared.
            masked_keys: Keys whose values must never be rendered.
            initial_capacity: Sizing hint, kept for API parity. Has no effect.
        """
        if initial_capacity is not None and initial_capacity < 0:
            raise ValueError(
                f"Illegal initial capacity: {initial_capacity}"
            )
        if isinstance(masked_keys, (str, bytes)):
            masked_keys = (masked_keys,)
        self._target: Dict[Hashable, List[Any]] = {}
        self._masked_keys = set(masked_keys) if masked_keys is not None else set()
        if mapping is not None:
            self.update(mapping)

    @classmethod
    def for_masked_key(cls, key: Hashable) -> "MaskingMultiValueMap":
        """Create an empty map with a single masked key."""
        return cls(masked_keys=(key,))

    # Masked keys

    @property
    def masked_keys(self) -> frozenset:
        return frozenset(self._masked_keys)

    def mask(self, *keys: Hashable) -> None:
        """Register keys whose values must not be rendered."""
        self._masked_keys.update(keys)

    def unmask(self, key: Hashable) -> None:
        self._masked_keys.discard(key)

    def is_masked(self, key: Hashable) -> bool:
        return key in self._masked_keys

    # Multi-value operations

    def add(self, key: Hashable, value: Any) -> None:
        """Append ``value`` to the list for ``key``, creating it if absent."""
        values = self._target.get(key)
        if values is None:
            values = []
            self._target[key] = values
        values.append(value)

    def get_first(self, key: Hashable, default: Any = None) -> Any:
        """
        Return the first value for ``key``.

        Returns ``default`` when the key is unmapped or its list is empty.
        """
        values = self._target.get(key)
        if values is None:
            return default
        if not values:
            logger.debug("Value list for key %r is empty", key)
            return default
        return values[0]

    def set(self, key: Hashable, value: Any) -> None:
        """Replace the values for ``key`` with the single ``value``."""
        self._target[key] = [value]

    def set_all(self, values: Any) -> None:
        """
        Call ``set`` for every key/value pair of ``values``.

        Args:
            values: A single-valued mapping or an iterable of pairs.
        """
        pairs = values.items() if isinstance(values, Mapping) else values
        for key, value in pairs:
            self.set(key, value)

    def to_single_value_dict(self) -> Dict[Hashable, Any]:
        """
        Return a dict of each key to its first value, in key order.

        Keys with an empty value list map to ``None``.
        """
        single_value_dict = {}
        for key, values in self._target.items():
            if not values:
                logger.debug("Value list for key %r is empty", key)
                single_value_dict[key] = None
            else:
                single_value_dict[key] = values[0]
        return single_value_dict

    def copy(self) -> "MaskingMultiValueMap":
        """Return a copy with the same masked keys and fresh value lists."""
        clone = type(self)(masked_keys=self._masked_keys)
        for key, values in self._target.items():
            clone._target[clone if key is self else key] = [
                clone if value is self else value for value in values
            ]
        return clone

    # Mapping implementation

    def __getitem__(self, key: Hashable) -> List[Any]:
        return self._target[key]

    def __setitem__(self, key: Hashable, values: Any) -> None:
        self._target[key] = _as_value_list(values)

    def __delitem__(self, key: Hashable) -> None:
        del self._target[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._target)

    def __len__(self) -> int:
        return len(self._target)

    def __contains__(self, key: object) -> bool:
        return key in self._target

    def is_empty(self) -> bool:
        return not self._target

    def contains_value(self, values: Any) -> bool:
        """Return True if some key maps to a list equal to ``values``."""
        return any(
            existing is values or existing == values
            for existing in self._target.values()
        )

    def setdefault(self, key: Hashable, default: Any = None) -> List[Any]:
        """Return the values for ``key``, storing ``default`` (or ``[]``) if absent."""
        if key not in self._target:
            self[key] = [] if default is None else default
        return self._target[key]

    def remove(self, key: Hashable) -> Optional[List[Any]]:
        """Remove ``key`` and return its values, or None if it was absent."""
        return self._target.pop(key, None)

    def clear(self) -> None:
        self._target.clear()

    def update(self, other: Any = (), /, **kwargs: Any) -> None:
        """
        Put every key -> list pair of ``other`` (and ``kwargs``).

        Sources exposing ``lists()``, such as Django's ``QueryDict``, are read
        through it so every submitted value is kept.
        """
        if isinstance(other, MaskingMultiValueMap):
            other = other._target
        elif hasattr(other, "lists"):
            other = [(key, list(values)) for key, values in other.lists()]
        super().update(other, **kwargs)

    # Equality, hashing and rendering

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if isinstance(other, MaskingMultiValueMap):
            other_target = other._target
            self_key = other
        elif isinstance(other, Mapping):
            other_target = other
            self_key = self
        else:
            return NotImplemented

        if len(self._target) != len(other_target):
            return False
        for key, values in self._target.items():
            if key is self:
                # Located by identity, the map's hash changes as it is mutated
                other_values = next(
                    (v for k, v in other_target.items() if k is self_key), None
                )
                if other_values is None:
                    return False
            elif key in other_target:
                other_values = other_target[key]
            else:
                return False
            if not self._values_equal(values, other_values, self_key):
                return False
        return True

    def _values_equal(self, values: List[Any], other_values: Any, other: object) -> bool:
        if values is other_values:
            return True
        if not isinstance(other_values, list) or len(values) != len(other_values):
            return False
        for value, other_value in zip(values, other_values):
            if value is self or other_value is other:
                if not (value is self and other_value is other):
                    return False
            elif not (value is other_value or value == other_value):
                return False
        return True

    def __hash__(self) -> int:
        h = 0
        for key, values in self._target.items():
            key_hash = 1
            if key is not None and key is not self:
                key_hash = _int32(key_hash + hash(key))
            values_hash = 1
            for value in values:
                element_hash = 0 if value is None or value is self else hash(value)
                values_hash = _int32(31 * values_hash + element_hash)
            h = _int32(h + (key_hash ^ values_hash))
        return h

    @reprlib.recursive_repr(fillvalue=SELF_REFERENCE_LABEL)
    def __str__(self) -> str:
        if not self._target:
            return "{}"

        parts = []
        for key, values in self._target.items():
            rendered_key = SELF_REFERENCE_LABEL if key is self else str(key)
            if key in self._masked_keys:
                rendered_values = PROTECTED_PLACEHOLDER
            else:
                rendered_values = "[" + ", ".join(
                    SELF_REFERENCE_LABEL if value is self else str(value)
                    for value in values
                ) + "]"
            parts.append(f"{rendered_key}={rendered_values}")
        return "{" + ", ".join(parts) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


__all__ = [
    "MaskingMultiValueMap",
    "PROTECTED_PLACEHOLDER",
    "SELF_REFERENCE_LABEL",
]
