"""
Grid placement for sprite cells.

Images fill the primary axis up to ``limit`` cells, then wrap onto the
next line of the secondary axis. With the ``cols`` layout the primary
axis runs horizontally (columns fill first); with ``rows`` it runs
vertically.
"""

from __future__ import annotations

from folder_sprite.config import LayoutConfig
from folder_sprite.type_defs import GridCell, PlacementCoordinate


def cell_for(ordinal: int, limit: int) -> GridCell:
    """Return the grid cell of the image at ``ordinal`` among accepted ones."""
    if ordinal < 0:
        msg = f"ordinal must be non-negative, got {ordinal}"
        raise ValueError(msg)
    return GridCell(primary=ordinal % limit, secondary=ordinal // limit)


def coordinate_for(cell: GridCell, layout: LayoutConfig) -> PlacementCoordinate:
    """Map a grid cell to canvas pixels for the configured axis."""
    if layout.axis == "rows":
        col_index, row_index = cell.secondary, cell.primary
    else:
        col_index, row_index = cell.primary, cell.secondary
    return PlacementCoordinate(
        x=layout.col_spacing * col_index,
        y=layout.row_spacing * row_index,
    )


class GridLayoutPlanner:
    """
    Stateful generator of placement coordinates.

    Holds the primary and secondary counters across a whole run. Call
    ``next_coordinate`` once per accepted image, in acceptance order;
    rejected or skipped files must not advance the planner.
    """

    def __init__(self, layout: LayoutConfig) -> None:
        self.layout = layout
        self.primary_index = 0
        self.secondary_index = 0
        self.ordinal = 0
        self._max_x = 0
        self._max_y = 0

    def reset(self) -> None:
        """Restart the sequence from the first cell."""
        self.primary_index = 0
        self.secondary_index = 0
        self.ordinal = 0
        self._max_x = 0
        self._max_y = 0

    def next_coordinate(self) -> PlacementCoordinate:
        """Return the coordinate for the next image and advance the grid."""
        coordinate = coordinate_for(
            GridCell(self.primary_index, self.secondary_index),
            self.layout,
        )

        self.primary_index += 1
        if self.primary_index % self.layout.limit == 0:
            self.primary_index = 0
            self.secondary_index += 1

        self.ordinal += 1
        self._max_x = max(self._max_x, coordinate.x)
        self._max_y = max(self._max_y, coordinate.y)
        return coordinate

    @property
    def extent(self) -> tuple[int, int]:
        """Farthest anchor emitted so far, as (x, y)."""
        return self._max_x, self._max_y

    def plan(self, count: int) -> list[PlacementCoordinate]:
        """Return the first ``count`` coordinates without touching state."""
        planner = GridLayoutPlanner(self.layout)
        return [planner.next_coordinate() for _ in range(count)]
