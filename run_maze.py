#Generate a maze of the requested size, solve it and print both

import argparse
import logging
import re
import sys

from display import Display
from geometry import MazeError, Size
from maze import generate_maze
from solver import solve_maze

logger = logging.getLogger(__name__)

SIZE_PATTERN = re.compile(r"(\d+)x(\d+)")


def parse_size(text):
    """
    Parse a maze size written as WIDTHxHEIGHT, for example 10x20.

    :param text: Command-line argument
    :return: Size with both dimensions at least 1
    """
    match = SIZE_PATTERN.fullmatch(text.strip())
    if match is None:
        raise argparse.ArgumentTypeError(f"invalid size {text!r}, expected WIDTHxHEIGHT such as 10x20")
    width, height = int(match.group(1)), int(match.group(2))
    if width < 1 or height < 1:
        raise argparse.ArgumentTypeError(f"invalid size {text!r}, width and height must be positive")
    return Size(width, height)


def build_parser():
    parser = argparse.ArgumentParser(description="Generate a random maze, solve it and print it.")
    parser.add_argument("size", type=parse_size, help="maze dimensions in cells, as WIDTHxHEIGHT")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        maze = generate_maze(args.size)
        display = Display.from_maze(maze)
        path = solve_maze(maze)
        display.draw_solution(path)
    except MazeError as exc:
        logger.error("Could not draw the maze: %s", exc)
        return 1

    display.print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
