"""Equal-gap spacing of members across a clear span.

Given a clear span S, member thickness T and member count N, the members are
placed so that the N+1 resulting empty cells are exactly equal:

    gap = (S - N*T) / (N + 1)
    position(i) = gap*i + T*(i - 1) + T/2      for i = 1..N

Positions are offsets of member centres from the start of the span. Every
value is computed in closed form from S, T and N, never accumulated, so
``gap*(N+1) + N*T`` reproduces S up to float rounding.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import GeometryOverflowError

__all__ = ["Spacing", "equal_gap_spacing"]


@dataclass(frozen=True)
class Spacing:
    """Result of spacing ``count`` members of ``thickness`` across ``span``."""

    span: float
    thickness: float
    count: int
    gap: float

    def position(self, i: int) -> float:
        """Centre offset of member ``i`` (1-based) from the span start."""
        if not 1 <= i <= self.count:
            raise IndexError(f"member index {i} out of range 1..{self.count}")
        return self.gap * i + self.thickness * (i - 1) + self.thickness / 2

    def positions(self) -> list[float]:
        return [self.position(i) for i in range(1, self.count + 1)]

    def cell_start(self, k: int) -> float:
        """Offset of the start of cell ``k`` (0-based) from the span start."""
        if not 0 <= k <= self.count:
            raise IndexError(f"cell index {k} out of range 0..{self.count}")
        return k * (self.gap + self.thickness)


def equal_gap_spacing(
    span: float,
    thickness: float,
    count: int,
    *,
    axis: str | None = None,
    level: str | None = None,
    cell_index: int | None = None,
    field: str | None = None,
) -> Spacing:
    """Space ``count`` members so the resulting cells are equal.

    Args:
        span: Clear span to subdivide.
        thickness: Thickness of each member along the span.
        count: Number of members (0 yields a single full-span cell).
        axis: Axis name, reported on overflow.
        level: Decomposition level, reported on overflow.
        cell_index: Owning cell, reported on overflow.
        field: Input field responsible for the count, reported on overflow.

    Returns:
        The resulting Spacing.

    Raises:
        GeometryOverflowError: If the members leave no positive gap.
    """
    if count < 0:
        raise ValueError("Member count cannot be negative")

    gap = (span - count * thickness) / (count + 1)
    if gap <= 0:
        where = f"{level} {axis}" if level and axis else (axis or level or "span")
        if cell_index is not None:
            where += f" of cell {cell_index}"
        raise GeometryOverflowError(
            f"{count} member(s) of {thickness} leave no clear gap in the "
            f"{span:g} {where}",
            field=field,
            axis=axis,
            level=level,
            cell_index=cell_index,
            count=count,
            span=span,
            value=count,
        )
    return Spacing(span=span, thickness=thickness, count=count, gap=gap)
