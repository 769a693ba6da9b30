#Used randomized depth-first search (DFS) algorithm to generate perfect mazes
#Each cell keeps a wall flag for each of its four sides

import logging
import random
from time import time

import numpy as np

from geometry import Direction, MazeError, Position, Size

logger = logging.getLogger(__name__)

# Entrance cell, the exit is always Size.max_position()
START = Position(0, 0)


class Tile:
    """Wall flags of a single cell, one per Direction."""

    __slots__ = ("sides",)

    def __init__(self, walled=True):
        self.sides = {side: walled for side in Direction}

    def is_walled(self, direction):
        return self.sides[direction]

    def open_sides(self):
        return [side for side in Direction if not self.sides[side]]

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return self.sides == other.sides

    def __repr__(self):
        walls = "".join(side.name[0] for side in Direction if self.sides[side])
        return f"Tile(walls={walls or '-'})"


class Maze:
    """
    Rectangular grid of tiles.

    The wall flags live in one boolean array of shape (height, width, 4),
    indexed by [y, x, direction.value].
    """

    def __init__(self, size, walled=True):
        size = Size(*size)
        if size.width < 1 or size.height < 1:
            raise ValueError(f"Maze dimensions must be positive, got {size.width}x{size.height}")
        self.size = size
        self.walls = np.full((size.height, size.width, len(Direction)), walled, dtype=bool)
        self.seal_boundary()

    def seal_boundary(self):
        # The outside of the grid is never passable
        self.walls[0, :, Direction.NORTH.value] = True
        self.walls[-1, :, Direction.SOUTH.value] = True
        self.walls[:, 0, Direction.WEST.value] = True
        self.walls[:, -1, Direction.EAST.value] = True

    def in_bounds(self, pos):
        return 0 <= pos[0] < self.size.width and 0 <= pos[1] < self.size.height

    def neighbor(self, pos, direction):
        """Adjacent position in a direction, or None when it would leave the grid."""
        dx, dy = direction.delta
        x, y = pos[0] + dx, pos[1] + dy
        if not self.in_bounds((x, y)):
            return None
        return Position(x, y)

    def tile(self, pos):
        x, y = pos
        tile = Tile()
        for side in Direction:
            tile.sides[side] = bool(self.walls[y, x, side.value])
        return tile

    def has_wall(self, pos, direction):
        x, y = pos
        return bool(self.walls[y, x, direction.value])

    def open_directions(self, pos):
        return [direction for direction in Direction if not self.has_wall(pos, direction)]

    def carve(self, pos, direction):
        """
        Knock down the wall between a cell and its neighbor.

        Both sides of the wall are removed together.

        :param pos: Position of the cell
        :param direction: Side of the cell to open
        :return: Position of the neighbor that was opened into
        """
        target = self.neighbor(pos, direction)
        if target is None:
            raise MazeError(f"Cannot carve the {direction.name.lower()} boundary wall of {tuple(pos)}")
        self.walls[pos[1], pos[0], direction.value] = False
        self.walls[target.y, target.x, direction.opposite.value] = False
        return target

    def place_tile(self, pos, tile):
        """
        Store a tile, keeping walls consistent with the surrounding cells.

        A side stays walled when it faces the outside of the grid or when the
        neighbor's matching side is walled.
        """
        x, y = pos
        for side in Direction:
            target = self.neighbor(pos, side)
            if target is None:
                walled = True
            else:
                walled = tile.is_walled(side) or self.has_wall(target, side.opposite)
            self.walls[y, x, side.value] = walled

    def passage_count(self):
        """Number of open connections between pairs of cells."""
        # Every passage is counted once from each side
        return int(np.count_nonzero(~self.walls)) // 2

    def positions(self):
        for y in range(self.size.height):
            for x in range(self.size.width):
                yield Position(x, y)


def carve_passages(maze, rng=None):
    """
    Carve a fully walled maze into a perfect maze.

    :param maze: Maze with every wall standing
    :param rng: random.Random used to pick directions
    :return: The same maze, carved in place
    """
    if rng is None:
        rng = random.Random()

    stack = [START]  # Use a stack to avoid recursion limit
    explored = {START}
    while stack:
        current = stack[-1]  # Look at the top of the stack
        valid_directions = []
        for direction in Direction:
            target = maze.neighbor(current, direction)
            if target is not None and target not in explored:
                valid_directions.append(direction)

        if valid_directions:
            direction = rng.choice(valid_directions)
            target = maze.carve(current, direction)  # Carve through the wall
            stack.append(target)
            explored.add(target)
        else:
            stack.pop()  # Backtrack if no moves are available

    return maze


def generate_maze(size, rng=None):
    """
    Generate a perfect maze with a path from the top-left corner to the bottom-right corner.

    :param size: Size of the maze in cells
    :param rng: Optional random.Random, seed it for reproducible mazes
    :return: The carved Maze
    """
    ts = time()
    maze = carve_passages(Maze(size, walled=True), rng)
    te = time()
    logger.debug("Generated %dx%d maze in %.2f ms", maze.size.width, maze.size.height, (te - ts) * 1000)
    return maze
