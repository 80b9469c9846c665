"""
Layout - Splits screen rectangles into regions by size constraints.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence


class ConstraintKind(Enum):
    LENGTH = "length"
    MIN = "min"
    MAX = "max"
    PERCENTAGE = "percentage"


@dataclass(frozen=True)
class Constraint:
    """Size requirement for one region of a split."""
    kind: ConstraintKind
    value: int

    @classmethod
    def length(cls, value: int) -> 'Constraint':
        return cls(ConstraintKind.LENGTH, value)

    @classmethod
    def min(cls, value: int) -> 'Constraint':
        return cls(ConstraintKind.MIN, value)

    @classmethod
    def max(cls, value: int) -> 'Constraint':
        return cls(ConstraintKind.MAX, value)

    @classmethod
    def percentage(cls, value: int) -> 'Constraint':
        return cls(ConstraintKind.PERCENTAGE, value)


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""
    y: int
    x: int
    height: int
    width: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    def inner(self, vertical_margin: int = 0, horizontal_margin: int = 0) -> 'Rect':
        """Shrink the rectangle by the given margins on each side."""
        return Rect(
            y=self.y + vertical_margin,
            x=self.x + horizontal_margin,
            height=max(0, self.height - 2 * vertical_margin),
            width=max(0, self.width - 2 * horizontal_margin),
        )


def _sizes(total: int, constraints: Sequence[Constraint]) -> List[int]:
    """
    Distribute total cells over constraints.

    Fixed-size constraints (length, max, percentage) are served first,
    then minimums in order; space left over goes to the last minimum
    constraint, or to the last region when there is none.
    """
    sizes = [0] * len(constraints)
    remaining = total

    for i, constraint in enumerate(constraints):
        if constraint.kind == ConstraintKind.PERCENTAGE:
            wanted = total * constraint.value // 100
        elif constraint.kind == ConstraintKind.MIN:
            continue
        else:
            wanted = constraint.value
        sizes[i] = min(max(0, wanted), remaining)
        remaining -= sizes[i]

    for i, constraint in enumerate(constraints):
        if constraint.kind == ConstraintKind.MIN:
            sizes[i] = min(max(0, constraint.value), remaining)
            remaining -= sizes[i]

    if remaining > 0 and constraints:
        growable = [i for i, c in enumerate(constraints) if c.kind == ConstraintKind.MIN]
        sizes[growable[-1] if growable else -1] += remaining

    return sizes


def split_vertical(rect: Rect, constraints: Sequence[Constraint]) -> List[Rect]:
    """Split a rectangle into stacked rows."""
    regions = []
    y = rect.y
    for size in _sizes(rect.height, constraints):
        regions.append(Rect(y=y, x=rect.x, height=size, width=rect.width))
        y += size
    return regions


def split_horizontal(rect: Rect, constraints: Sequence[Constraint]) -> List[Rect]:
    """Split a rectangle into side-by-side columns."""
    regions = []
    x = rect.x
    for size in _sizes(rect.width, constraints):
        regions.append(Rect(y=rect.y, x=x, height=rect.height, width=size))
        x += size
    return regions
