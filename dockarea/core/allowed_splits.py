"""Which directions a docking region may be split in.

Four independent flags packed into the low bits of one integer:

    LEFT    0b1000
    RIGHT   0b0100
    TOP     0b0010   (Split.ABOVE)
    BOTTOM  0b0001   (Split.BELOW)

Only 0-15 is a valid encoding. A raw value outside that range is a bug in
the caller and raises InvalidEncoding; it is never clamped.
"""

from __future__ import annotations

import functools
import operator
from dataclasses import dataclass
from typing import ClassVar

from dockarea.core.split import Split, is_left_right, is_top_bottom

_LEFT = 0b1000
_RIGHT = 0b0100
_TOP = 0b0010
_BOTTOM = 0b0001
_MAX_BITS = 0b1111

# Order matters: directions() and repr() walk these left, right, top, bottom
_SPLIT_BITS: dict[Split, int] = {
    Split.LEFT: _LEFT,
    Split.RIGHT: _RIGHT,
    Split.ABOVE: _TOP,
    Split.BELOW: _BOTTOM,
}
_LEFT_RIGHT = functools.reduce(
    operator.or_, (mask for split, mask in _SPLIT_BITS.items() if is_left_right(split))
)
_TOP_BOTTOM = functools.reduce(
    operator.or_, (mask for split, mask in _SPLIT_BITS.items() if is_top_bottom(split))
)
_BIT_NAMES: tuple[tuple[str, int], ...] = (
    ("LEFT", _LEFT),
    ("RIGHT", _RIGHT),
    ("TOP", _TOP),
    ("BOTTOM", _BOTTOM),
)


class InvalidEncoding(ValueError):
    """Raw bits outside 0-15 were given for an AllowedSplits."""


@dataclass(frozen=True, repr=False)
class AllowedSplits:
    """Set of split directions allowed for one docking region.

    Immutable value: the operators return new instances, and ``&=``/``|=``
    rebind the name rather than mutating the operand. ``AllowedSplits()``
    allows everything.
    """

    bits: int = _MAX_BITS

    # Presets, assigned below the class body
    ALL: ClassVar[AllowedSplits]
    NONE: ClassVar[AllowedSplits]
    LEFT: ClassVar[AllowedSplits]
    RIGHT: ClassVar[AllowedSplits]
    LEFT_RIGHT: ClassVar[AllowedSplits]
    TOP: ClassVar[AllowedSplits]
    BOTTOM: ClassVar[AllowedSplits]
    TOP_BOTTOM: ClassVar[AllowedSplits]

    def __post_init__(self) -> None:
        bits = self.bits
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise TypeError(
                f"AllowedSplits bits must be an int, got {type(bits).__name__}"
            )
        if not 0 <= bits <= _MAX_BITS:
            raise InvalidEncoding(
                f"Provided an invalid value for allowed splits: {bits:#x}"
            )

    @classmethod
    def from_bits(cls, bits: int) -> AllowedSplits:
        """Create allowed splits from a raw 4-bit value.

        Raises InvalidEncoding if bits is outside 0-15.
        """
        return cls(bits)

    def __and__(self, other: object) -> AllowedSplits:
        if not isinstance(other, AllowedSplits):
            return NotImplemented
        return AllowedSplits.from_bits(self.bits & other.bits)

    def __iand__(self, other: AllowedSplits) -> AllowedSplits:
        return self & other

    def __or__(self, other: object) -> AllowedSplits:
        if not isinstance(other, AllowedSplits):
            return NotImplemented
        return AllowedSplits.from_bits(self.bits | other.bits)

    def __ior__(self, other: AllowedSplits) -> AllowedSplits:
        return self | other

    def __repr__(self) -> str:
        names = [name for name, mask in _BIT_NAMES if self.bits & mask]
        return f"AllowedSplits({'|'.join(names) or 'NONE'})"

    def top(self) -> bool:
        """Are we allowed to split above?"""
        return self.bits & _TOP != 0

    def bottom(self) -> bool:
        """Are we allowed to split below?"""
        return self.bits & _BOTTOM != 0

    def top_or_bottom(self) -> bool:
        """Are we allowed to split vertically?"""
        return self.bits & _TOP_BOTTOM != 0

    def left(self) -> bool:
        """Are we allowed to split left?"""
        return self.bits & _LEFT != 0

    def right(self) -> bool:
        """Are we allowed to split right?"""
        return self.bits & _RIGHT != 0

    def left_or_right(self) -> bool:
        """Are we allowed to split horizontally?"""
        return self.bits & _LEFT_RIGHT != 0

    def none(self) -> bool:
        """Are all splits disallowed?"""
        return self.bits == 0

    def all(self) -> bool:
        """Are all splits allowed?"""
        return self.bits == _MAX_BITS

    def allowed(self, split: Split) -> bool:
        """Whether the engine may split this region on the given side."""
        return self.bits & _SPLIT_BITS[split] != 0

    def directions(self) -> list[Split]:
        """Allowed sides in fixed order: left, right, above, below."""
        return [split for split, mask in _SPLIT_BITS.items() if self.bits & mask]


AllowedSplits.ALL = AllowedSplits(_MAX_BITS)
AllowedSplits.NONE = AllowedSplits(0)
AllowedSplits.LEFT = AllowedSplits(_LEFT)
AllowedSplits.RIGHT = AllowedSplits(_RIGHT)
AllowedSplits.LEFT_RIGHT = AllowedSplits(_LEFT_RIGHT)
AllowedSplits.TOP = AllowedSplits(_TOP)
AllowedSplits.BOTTOM = AllowedSplits(_BOTTOM)
AllowedSplits.TOP_BOTTOM = AllowedSplits(_TOP_BOTTOM)


def effective_splits(own: AllowedSplits, *ancestors: AllowedSplits) -> AllowedSplits:
    """A region may only split where it and every ancestor allow it."""
    return functools.reduce(operator.and_, ancestors, own)
