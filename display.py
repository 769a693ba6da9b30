#Character canvas that draws mazes and solution paths out of line segments
#Cell (x, y) is drawn at (2x + 1, 2y + 1), walls sit on the even rows and columns

import numpy as np

from geometry import Axis, Direction, MazeError, Position, Rectangle, Size, Vector
from maze import Maze

WALL_SYMBOL = "█"
PATH_SYMBOL = "•"
BLANK_SYMBOL = " "

# Blank columns and rows printed before the canvas
DISPLAY_ORIGIN = Position(1, 1)


class SizeMismatchError(MazeError):
    """Raised when a maze is drawn on a canvas sized for different dimensions."""


def canvas_size(maze_size):
    """Canvas needed to draw a maze, leaving a wall line between cells."""
    return Size(maze_size[0] * 2 + 1, maze_size[1] * 2 + 1)


def to_canvas(pos):
    return Position(pos[0] * 2 + 1, pos[1] * 2 + 1)


class Display:
    """
    Two-dimensional character buffer with line drawing primitives.

    :param origin: Padding (columns, rows) added in front of the buffer when printed
    :param size: Buffer dimensions
    """

    def __init__(self, origin, size):
        size = Size(*size)
        self.origin = Position(*origin)
        self.size = size
        self.pixels = np.full((size.height, size.width), BLANK_SYMBOL, dtype="<U1")

    @classmethod
    def from_maze(cls, maze, origin=DISPLAY_ORIGIN):
        display = cls(origin, canvas_size(maze.size))
        display.draw_maze(maze)
        return display

    def _check_bounds(self, pos):
        if not (0 <= pos[0] < self.size.width and 0 <= pos[1] < self.size.height):
            raise IndexError(f"{tuple(pos)} is outside the {self.size.width}x{self.size.height} canvas")

    def draw_point(self, pos, symbol=PATH_SYMBOL):
        self._check_bounds(pos)
        self.pixels[pos[1], pos[0]] = symbol

    def draw_line(self, vector, symbol=WALL_SYMBOL):
        start, end = vector.origin, vector.end
        self._check_bounds(start)
        self._check_bounds(end)
        # The vector may run towards smaller coordinates
        if vector.direction.axis is Axis.HORIZONTAL:
            low, high = sorted((start.x, end.x))
            self.pixels[start.y, low:high + 1] = symbol
        else:
            low, high = sorted((start.y, end.y))
            self.pixels[low:high + 1, start.x] = symbol

    def draw_rect(self, rectangle, symbol=WALL_SYMBOL):
        for vector in rectangle.vectors():
            self.draw_line(vector, symbol)

    def draw_maze(self, maze, symbol=WALL_SYMBOL):
        """
        Draw the outline and every wall of a maze.

        :param maze: Maze to draw, the canvas must have been sized for it
        :param symbol: Character used for walls
        """
        expected = canvas_size(maze.size)
        if self.size != expected:
            raise SizeMismatchError(
                f"A {maze.size.width}x{maze.size.height} maze needs a "
                f"{expected.width}x{expected.height} canvas, got {self.size.width}x{self.size.height}"
            )

        self.draw_rect(Rectangle(Position(0, 0), self.size), symbol)
        for pos in maze.positions():
            center = to_canvas(pos)
            for side in Direction:
                if not maze.has_wall(pos, side):
                    continue
                # Three characters across the gap between the two cells
                middle = center.translate(side)
                before, after = side.perpendiculars
                self.draw_line(Vector(middle.translate(before), after, 3), symbol)

    def draw_path(self, path, symbol=PATH_SYMBOL):
        """
        Join consecutive canvas positions with straight lines.

        :param path: Positions in canvas coordinates
        :param symbol: Character used for the path
        """
        if len(path) == 1:
            self.draw_point(path[0], symbol)
        for start, end in zip(path, path[1:]):
            self.draw_line(Vector.from_points(start, end), symbol)

    def draw_solution(self, path, symbol=PATH_SYMBOL):
        """Draw a path given in maze cells and mark the entrance and the exit on the border."""
        points = [to_canvas(pos) for pos in path]
        self.draw_path(points, symbol)
        self.draw_point(points[0].translate(Direction.NORTH), symbol)
        self.draw_point(points[-1].translate(Direction.SOUTH), symbol)

    def rows(self):
        padding = " " * self.origin.x
        lines = [""] * self.origin.y
        for row in self.pixels:
            lines.append(padding + "".join(row))
        return lines

    def render(self):
        return "\n".join(self.rows())

    def print(self, file=None):
        print(self.render(), file=file)


def read_maze(display, size):
    """
    Recover the walls of a maze drawn on a display.

    Each wall is read from the middle character of its segment.

    :param display: Display holding a drawn maze
    :param size: Size of the maze in cells
    :return: Maze with the walls found on the canvas
    """
    expected = canvas_size(size)
    if display.size != expected:
        raise SizeMismatchError(
            f"A {expected.width}x{expected.height} canvas is needed to read a "
            f"{size[0]}x{size[1]} maze, got {display.size.width}x{display.size.height}"
        )

    maze = Maze(size, walled=False)
    for pos in maze.positions():
        center = to_canvas(pos)
        for side in Direction:
            middle = center.translate(side)
            maze.walls[pos.y, pos.x, side.value] = display.pixels[middle.y, middle.x] == WALL_SYMBOL
    # Entrance and exit marks sit on the outer wall
    maze.seal_boundary()
    return maze
