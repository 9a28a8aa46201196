# src/niml/parsers/models.py

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

Scalar: TypeAlias = str
Section: TypeAlias = Mapping[str, Scalar]
Value: TypeAlias = Scalar | Section


@dataclass(frozen=True, eq=False)
class ParsedDocument(Mapping[str, Value]):
    """Result of parsing one niml text.

    Top-level keys map either to a scalar string or to a section (one level
    of topic grouping). Read-only after construction: sections are exposed
    as read-only views and the document compares by value.
    """

    entries: Mapping[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen: dict[str, Value] = {}
        for key, value in self.entries.items():
            if isinstance(value, Mapping):
                frozen[key] = MappingProxyType(dict(value))
            else:
                frozen[key] = value
        object.__setattr__(self, "entries", MappingProxyType(frozen))

    def __getitem__(self, key: str) -> Value:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def section(self, name: str) -> Section | None:
        """Return the section declared as ``(name)``, or None."""
        value = self.entries.get(name)
        return value if isinstance(value, Mapping) else None

    def sections(self) -> dict[str, Section]:
        return {k: v for k, v in self.entries.items() if isinstance(v, Mapping)}

    def scalars(self) -> dict[str, Scalar]:
        return {k: v for k, v in self.entries.items() if isinstance(v, str)}

    def to_dict(self) -> dict[str, str | dict[str, str]]:
        """Plain, mutable deep copy of the document."""
        return {
            k: dict(v) if isinstance(v, Mapping) else v
            for k, v in self.entries.items()
        }
