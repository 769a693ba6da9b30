#Grid geometry shared by the maze generator, the solver and the text display
#Positions are (x, y) with y growing southwards

from enum import Enum
from typing import NamedTuple


class MazeError(ValueError):
    """Raised when a maze, a path or a drawing breaks one of its invariants."""


class NonOrthogonalError(MazeError):
    """Raised when two points cannot be joined by a single axis-aligned line."""


class Axis(Enum):
    HORIZONTAL = 0
    VERTICAL = 1


class Direction(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def axis(self):
        if self in (Direction.EAST, Direction.WEST):
            return Axis.HORIZONTAL
        return Axis.VERTICAL

    @property
    def opposite(self):
        return Direction((self.value + 2) % 4)

    @property
    def perpendiculars(self):
        """The two directions lying on the other axis."""
        if self.axis is Axis.HORIZONTAL:
            return (Direction.NORTH, Direction.SOUTH)
        return (Direction.EAST, Direction.WEST)

    @property
    def delta(self):
        return _DELTAS[self]


# (dx, dy) of a single step
_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


class Position(NamedTuple):
    x: int
    y: int

    def translate(self, direction, steps=1):
        """
        Move a number of steps along a direction.

        :param direction: Direction to move in
        :param steps: Number of unit steps
        :return: The new Position
        """
        dx, dy = direction.delta
        x, y = self.x + dx * steps, self.y + dy * steps
        if x < 0 or y < 0:
            raise ValueError(f"Cannot move {self} {steps} step(s) {direction.name.lower()}")
        return Position(x, y)


class Size(NamedTuple):
    width: int
    height: int

    @classmethod
    def square(cls, size):
        return cls(size, size)

    @property
    def area(self):
        return self.width * self.height

    def max_position(self):
        """Coordinate of the bottom-right cell."""
        return Position(self.width - 1, self.height - 1)


class Vector:
    """
    Directed, axis-aligned line segment.

    The magnitude counts grid cells and includes the origin, so a vector of
    magnitude 1 covers the origin only.
    """

    __slots__ = ("origin", "direction", "magnitude")

    def __init__(self, origin, direction, magnitude):
        if magnitude < 1:
            raise ValueError(f"Vector magnitude must be at least 1, got {magnitude}")
        self.origin = Position(*origin)
        self.direction = direction
        self.magnitude = magnitude

    @classmethod
    def from_points(cls, start, end):
        """
        Build the vector running from start to end.

        :param start: First Position
        :param end: Last Position, sharing a row or a column with start
        :return: A Vector covering both endpoints
        """
        dx, dy = end[0] - start[0], end[1] - start[1]
        if dx and dy:
            raise NonOrthogonalError(f"{tuple(start)} and {tuple(end)} are not on the same row or column")
        if dx > 0:
            direction = Direction.EAST
        elif dx < 0:
            direction = Direction.WEST
        elif dy > 0:
            direction = Direction.SOUTH
        elif dy < 0:
            direction = Direction.NORTH
        else:
            # Both points are the same cell
            direction = Direction.EAST
        return cls(start, direction, abs(dx) + abs(dy) + 1)

    @property
    def end(self):
        return self.origin.translate(self.direction, self.magnitude - 1)

    def positions(self):
        position = self.origin
        yield position
        for _ in range(self.magnitude - 1):
            position = position.translate(self.direction)
            yield position

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return (self.origin, self.direction, self.magnitude) == (other.origin, other.direction, other.magnitude)

    def __hash__(self):
        return hash((self.origin, self.direction, self.magnitude))

    def __repr__(self):
        return f"Vector({tuple(self.origin)}, {self.direction.name}, {self.magnitude})"


class Rectangle:
    __slots__ = ("origin", "size")

    def __init__(self, origin, size):
        self.origin = Position(*origin)
        self.size = Size(*size)

    def vectors(self):
        """The four edges, clockwise starting with the top edge."""
        width, height = self.size
        top = Vector(self.origin, Direction.EAST, width)
        right = Vector(top.end, Direction.SOUTH, height)
        bottom = Vector(right.end, Direction.WEST, width)
        left = Vector(bottom.end, Direction.NORTH, height)
        return [top, right, bottom, left]
