#Depth-first search from the entrance to the exit of a generated maze

import logging
import random
from time import time

from geometry import MazeError
from maze import START

logger = logging.getLogger(__name__)


def dedup_path(path):
    """Drop positions that repeat the one right before them."""
    deduped = []
    for position in path:
        if not deduped or deduped[-1] != position:
            deduped.append(position)
    return deduped


def solve_maze(maze, rng=None):
    """
    Find a path through a maze.

    The search is not guaranteed to be the shortest route; in a perfect maze
    there is only one simple path anyway.

    :param maze: Generated Maze
    :param rng: random.Random used to break ties between open moves
    :return: List of Positions from (0, 0) to the bottom-right cell
    """
    if rng is None:
        rng = random.Random()

    ts = time()
    goal = maze.size.max_position()
    path = [START]
    explored = {START}
    while path[-1] != goal:
        current = path[-1]
        moves = []
        for direction in maze.open_directions(current):
            target = maze.neighbor(current, direction)
            if target is not None and target not in explored:
                moves.append(target)

        if moves:
            target = rng.choice(moves)
            path.append(target)
            explored.add(target)
        else:
            path.pop()  # Dead end, step back
            if not path:
                raise MazeError(f"No path from {tuple(START)} to {tuple(goal)}")

    te = time()
    logger.debug("Solved maze in %.2f ms after exploring %d cells", (te - ts) * 1000, len(explored))
    return dedup_path(path)
