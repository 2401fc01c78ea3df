"""
Grid and cell model shared by every search and generator.

A grid stores read-only numpy arrays for walls and weights plus the start and
finish coordinates. Nothing in the library mutates a grid; edits always
produce a new one.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..config import settings
from .exceptions import ConfigurationError

Coord = Tuple[int, int]  # (row, col)

# Neighbor enumeration order: up, right, down, left
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

MIN_WEIGHT = 1
MAX_WEIGHT = 10

_WALL_CHAR = "#"
_OPEN_CHAR = "."
_START_CHAR = "S"
_FINISH_CHAR = "F"


@dataclass(frozen=True)
class Node:
    """A single grid cell."""

    row: int
    col: int
    is_wall: bool = False
    is_start: bool = False
    is_finish: bool = False
    weight: int = 1

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


@dataclass(frozen=True)
class WallEdit:
    """Set or clear the wall flag of one cell."""

    row: int
    col: int
    is_wall: bool = True

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


@dataclass(frozen=True)
class WeightEdit:
    """Set the entry cost of one cell."""

    row: int
    col: int
    weight: int

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


Edit = Union[WallEdit, WeightEdit]


def manhattan(a: Coord, b: Coord) -> int:
    """Manhattan distance between two coordinates."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def default_endpoints(rows: int, cols: int) -> Tuple[Coord, Coord]:
    """
    Pick start and finish positions that fit any valid grid.

    Start sits one cell in from the top-left corner and finish in the centre.
    On grids small enough for the two to coincide, finish moves towards the
    bottom-right corner.
    """
    start = (min(1, rows - 2), min(1, cols - 2))
    finish = (rows // 2, cols // 2)
    if start == finish:
        finish = (max(start[0] + 1, rows - 2), max(start[1] + 1, cols - 2))
    return start, finish


class Grid:
    """
    Immutable rectangular grid of cells.

    Attributes:
        walls: bool array of shape (rows, cols), True where impassable
        weights: int32 array of shape (rows, cols), entry cost of each cell
        start: start coordinate
        finish: finish coordinate
    """

    def __init__(self, walls: np.ndarray, weights: np.ndarray, start: Coord, finish: Coord):
        walls = np.array(walls, dtype=bool)
        weights = np.array(weights, dtype=np.int32)
        start = (int(start[0]), int(start[1]))
        finish = (int(finish[0]), int(finish[1]))

        _validate(walls, weights, start, finish)

        walls.flags.writeable = False
        weights.flags.writeable = False
        self.walls = walls
        self.weights = weights
        self.start = start
        self.finish = finish

    # -------------------- constructors --------------------

    @classmethod
    def create(
        cls,
        rows: int,
        cols: int,
        start: Optional[Coord] = None,
        finish: Optional[Coord] = None,
    ) -> "Grid":
        """Create an open grid with unit weights."""
        default_start, default_finish = default_endpoints(rows, cols)
        return cls(
            np.zeros((rows, cols), dtype=bool),
            np.ones((rows, cols), dtype=np.int32),
            start if start is not None else default_start,
            finish if finish is not None else default_finish,
        )

    @classmethod
    def from_nodes(cls, nodes: Sequence[Sequence[Node]]) -> "Grid":
        """
        Build a grid from a nested list of nodes.

        Raises:
            ConfigurationError: if rows are ragged, coordinates disagree with
                positions, or start/finish are missing or duplicated
        """
        if not nodes or not nodes[0]:
            raise ConfigurationError("Grid must contain at least one row and column")

        rows = len(nodes)
        cols = len(nodes[0])
        walls = np.zeros((rows, cols), dtype=bool)
        weights = np.ones((rows, cols), dtype=np.int32)
        starts: List[Coord] = []
        finishes: List[Coord] = []

        for r, row in enumerate(nodes):
            if len(row) != cols:
                raise ConfigurationError(
                    f"Grid rows must be rectangular: row {r} has {len(row)} cells, expected {cols}"
                )
            for c, node in enumerate(row):
                if (node.row, node.col) != (r, c):
                    raise ConfigurationError(
                        f"Node at position ({r}, {c}) reports coordinate ({node.row}, {node.col})"
                    )
                walls[r, c] = node.is_wall
                weights[r, c] = node.weight
                if node.is_start:
                    starts.append((r, c))
                if node.is_finish:
                    finishes.append((r, c))

        return cls(walls, weights, _single(starts, "start"), _single(finishes, "finish"))

    @classmethod
    def from_strings(cls, lines: Iterable[str]) -> "Grid":
        """
        Parse a text layout.

        ``S`` start, ``F`` finish, ``#`` wall, ``.`` open, ``1``-``9`` weight
        and ``0`` for weight 10.
        """
        rows_text = [line.strip() for line in lines if line.strip()]
        if not rows_text:
            raise ConfigurationError("Grid layout is empty")

        cols = len(rows_text[0])
        walls = np.zeros((len(rows_text), cols), dtype=bool)
        weights = np.ones((len(rows_text), cols), dtype=np.int32)
        starts: List[Coord] = []
        finishes: List[Coord] = []

        for r, text in enumerate(rows_text):
            if len(text) != cols:
                raise ConfigurationError(
                    f"Grid rows must be rectangular: row {r} has {len(text)} cells, expected {cols}"
                )
            for c, char in enumerate(text):
                if char == _WALL_CHAR:
                    walls[r, c] = True
                elif char == _START_CHAR:
                    starts.append((r, c))
                elif char == _FINISH_CHAR:
                    finishes.append((r, c))
                elif char.isdigit():
                    weights[r, c] = int(char) if char != "0" else MAX_WEIGHT
                elif char != _OPEN_CHAR:
                    raise ConfigurationError(f"Unknown cell character {char!r} at ({r}, {c})")

        return cls(walls, weights, _single(starts, "start"), _single(finishes, "finish"))

    # -------------------- queries --------------------

    @property
    def rows(self) -> int:
        return int(self.walls.shape[0])

    @property
    def cols(self) -> int:
        return int(self.walls.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def has_weights(self) -> bool:
        """True when any open cell costs more than 1 to enter."""
        return bool(np.any(self.weights[~self.walls] != 1))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_wall(self, row: int, col: int) -> bool:
        return bool(self.walls[row, col])

    def is_passable(self, row: int, col: int) -> bool:
        """In bounds and not a wall."""
        return 0 <= row < self.rows and 0 <= col < self.cols and not self.walls[row, col]

    def weight(self, row: int, col: int) -> int:
        return int(self.weights[row, col])

    def node(self, row: int, col: int) -> Node:
        if not self.in_bounds(row, col):
            raise ConfigurationError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} grid")
        return Node(
            row=row,
            col=col,
            is_wall=bool(self.walls[row, col]),
            is_start=(row, col) == self.start,
            is_finish=(row, col) == self.finish,
            weight=int(self.weights[row, col]),
        )

    def nodes(self) -> List[List[Node]]:
        return [[self.node(r, c) for c in range(self.cols)] for r in range(self.rows)]

    def neighbors(self, coord: Coord) -> List[Coord]:
        """Passable orthogonal neighbors in up, right, down, left order."""
        row, col = coord
        result = []
        for dr, dc in DIRECTIONS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols and not self.walls[nr, nc]:
                result.append((nr, nc))
        return result

    def require_open(self, coord: Coord, role: str) -> Coord:
        """Validate a caller supplied endpoint and return it as a tuple of ints."""
        row, col = int(coord[0]), int(coord[1])
        if not self.in_bounds(row, col):
            raise ConfigurationError(f"{role} {coord} is outside a {self.rows}x{self.cols} grid")
        if self.walls[row, col]:
            raise ConfigurationError(f"{role} {coord} is a wall")
        return (row, col)

    # -------------------- derived grids --------------------

    def clear_walls(self) -> "Grid":
        """Copy with every wall removed and every weight reset to 1."""
        return Grid(
            np.zeros(self.shape, dtype=bool),
            np.ones(self.shape, dtype=np.int32),
            self.start,
            self.finish,
        )

    def to_strings(self) -> List[str]:
        """Inverse of ``from_strings``."""
        lines = []
        for r in range(self.rows):
            chars = []
            for c in range(self.cols):
                if (r, c) == self.start:
                    chars.append(_START_CHAR)
                elif (r, c) == self.finish:
                    chars.append(_FINISH_CHAR)
                elif self.walls[r, c]:
                    chars.append(_WALL_CHAR)
                elif self.weights[r, c] == 1:
                    chars.append(_OPEN_CHAR)
                else:
                    chars.append(str(int(self.weights[r, c]) % 10))
            lines.append("".join(chars))
        return lines

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.start == other.start
            and self.finish == other.finish
            and np.array_equal(self.walls, other.walls)
            and np.array_equal(self.weights, other.weights)
        )

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, start={self.start}, finish={self.finish})"


def apply_edits(grid: Grid, edits: Iterable[Edit]) -> Grid:
    """
    Apply wall and weight edits to a copy of ``grid``.

    Setting a wall resets the cell weight to 1; setting a weight clears any
    wall. The edits are applied in order and all-or-nothing.

    Raises:
        ConfigurationError: if an edit is out of bounds, walls an endpoint or
            sets a weight below 1
    """
    walls = grid.walls.copy()
    weights = grid.weights.copy()

    for edit in edits:
        row, col = edit.row, edit.col
        if not grid.in_bounds(row, col):
            raise ConfigurationError(f"Edit at ({row}, {col}) is outside the grid")
        if isinstance(edit, WallEdit):
            if edit.is_wall and (row, col) in (grid.start, grid.finish):
                raise ConfigurationError(f"Cannot place a wall on endpoint ({row}, {col})")
            walls[row, col] = edit.is_wall
            weights[row, col] = 1
        elif isinstance(edit, WeightEdit):
            if edit.weight < MIN_WEIGHT:
                raise ConfigurationError(f"Weight at ({row}, {col}) must be >= {MIN_WEIGHT}")
            walls[row, col] = False
            weights[row, col] = edit.weight
        else:
            raise ConfigurationError(f"Unsupported edit type {type(edit).__name__}")

    return Grid(walls, weights, grid.start, grid.finish)


def path_cost(grid: Grid, path: Sequence[Coord]) -> float:
    """Sum of entry weights along ``path`` (the start cell is free); inf if empty."""
    if not path:
        return float("inf")
    return float(sum(int(grid.weights[r, c]) for r, c in path[1:]))


def _single(coords: List[Coord], role: str) -> Coord:
    if not coords:
        raise ConfigurationError(f"Grid has no {role} cell")
    if len(coords) > 1:
        raise ConfigurationError(f"Grid has {len(coords)} {role} cells, expected exactly one")
    return coords[0]


def _validate(walls: np.ndarray, weights: np.ndarray, start: Coord, finish: Coord) -> None:
    if walls.ndim != 2:
        raise ConfigurationError(f"Grid must be two dimensional, got shape {walls.shape}")
    if weights.shape != walls.shape:
        raise ConfigurationError(f"Weights shape {weights.shape} does not match walls {walls.shape}")

    rows, cols = walls.shape
    minimum = settings.min_grid_dimension
    if rows < minimum or cols < minimum:
        raise ConfigurationError(f"Grid must be at least {minimum}x{minimum}, got {rows}x{cols}")
    if rows > settings.max_grid_rows or cols > settings.max_grid_cols:
        raise ConfigurationError(
            f"Grid {rows}x{cols} exceeds the configured maximum "
            f"{settings.max_grid_rows}x{settings.max_grid_cols}"
        )

    for role, (r, c) in (("start", start), ("finish", finish)):
        if not (0 <= r < rows and 0 <= c < cols):
            raise ConfigurationError(f"{role} {(r, c)} is outside a {rows}x{cols} grid")
        if walls[r, c]:
            raise ConfigurationError(f"{role} {(r, c)} is a wall")
    if start == finish:
        raise ConfigurationError(f"start and finish must differ, both are {start}")

    if np.any(weights < MIN_WEIGHT):
        raise ConfigurationError(f"Cell weights must be >= {MIN_WEIGHT}")
