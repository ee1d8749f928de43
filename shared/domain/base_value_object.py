"""
Immutable value types shared by the order and cart domain.
"""
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict


@dataclass(frozen=True)
class ValueObject:
    """
    Frozen dataclass base.

    Subclasses are declared with ``@dataclass(frozen=True)`` so equality and
    hashing come from their fields.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Field values as a plain dict, nested value objects included."""
        return asdict(self)

    def evolve(self, **changes) -> 'ValueObject':
        """Copy with the given fields replaced; unknown names raise TypeError."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"{type(self).__name__} has no field(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)
