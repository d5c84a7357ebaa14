"""Skill lookup and the read-only attribute set."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from scrimmage.core.attributes.base import (
    ALL_ATTRIBUTES,
    AttributeDefinition,
    clamp_rating,
)

DEFAULT_ATTRIBUTE_VALUE = 50

ATTRIBUTES: Mapping[str, AttributeDefinition] = MappingProxyType(
    {definition.name: definition for definition in ALL_ATTRIBUTES}
)


@dataclass(frozen=True)
class AttributeSet:
    """
    Read-only view of a participant's attribute values.

    Owned by the roster system; the engine never writes to it. Values are
    clamped to [0, 100] when the set is built. Names outside the engine's
    skill list are kept, so a roster system can carry extra skills
    through play results untouched.
    """

    _values: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        clamped = {name: clamp_rating(value) for name, value in dict(self._values).items()}
        object.__setattr__(self, "_values", clamped)

    def get(self, attr_name: str, default: float = DEFAULT_ATTRIBUTE_VALUE) -> float:
        """Value for ``attr_name``, 50 when the set does not carry it."""
        return self._values.get(attr_name, default)

    def __getitem__(self, attr_name: str) -> float:
        return self._values[attr_name]

    def __contains__(self, attr_name: object) -> bool:
        return attr_name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def items(self) -> Iterator[tuple[str, float]]:
        return iter(self._values.items())

    @property
    def average(self) -> float:
        """Mean of all set attributes, 50 when empty."""
        if not self._values:
            return float(DEFAULT_ATTRIBUTE_VALUE)
        return sum(self._values.values()) / len(self._values)

    def with_values(self, **updates: float) -> "AttributeSet":
        """Copy with some values replaced."""
        return AttributeSet({**self._values, **updates})

    def to_dict(self) -> dict[str, float]:
        return dict(self._values)

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "AttributeSet":
        return cls(dict(data))

    @classmethod
    def uniform(cls, value: float, names: Iterable[str] | None = None) -> "AttributeSet":
        """Every engine skill (or just ``names``) at ``value``."""
        return cls(dict.fromkeys(ATTRIBUTES if names is None else names, value))
