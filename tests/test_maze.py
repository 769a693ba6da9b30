import random
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from geometry import Direction, MazeError, Position, Size
from maze import Maze, Tile, carve_passages, generate_maze


def flood_fill(maze):
    """Walk every open connection from (0, 0), returning visited cells and repeat visits."""
    seen = {Position(0, 0)}
    revisits = 0
    stack = [(Position(0, 0), None)]
    while stack:
        current, came_from = stack.pop()
        for direction in maze.open_directions(current):
            target = maze.neighbor(current, direction)
            if target == came_from:
                continue
            if target in seen:
                revisits += 1
                continue
            seen.add(target)
            stack.append((target, current))
    return seen, revisits


class TileTestCase(unittest.TestCase):
    def test_new_tiles_are_all_walled_or_all_open(self) -> None:
        self.assertTrue(all(Tile(walled=True).sides.values()))
        self.assertFalse(any(Tile(walled=False).sides.values()))
        self.assertEqual(Tile(walled=False).open_sides(), list(Direction))


class MazeModelTestCase(unittest.TestCase):
    def test_rejects_empty_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            Maze(Size(0, 3))

    def test_open_maze_keeps_boundary_walls(self) -> None:
        maze = Maze(Size(3, 2), walled=False)
        self.assertTrue(maze.has_wall((0, 0), Direction.NORTH))
        self.assertTrue(maze.has_wall((0, 0), Direction.WEST))
        self.assertFalse(maze.has_wall((0, 0), Direction.EAST))
        self.assertTrue(maze.has_wall((2, 1), Direction.EAST))
        self.assertTrue(maze.has_wall((2, 1), Direction.SOUTH))
        # 2 horizontal passages per row and 3 vertical ones
        self.assertEqual(maze.passage_count(), 7)

    def test_neighbor_stays_inside(self) -> None:
        maze = Maze(Size(2, 2))
        self.assertIsNone(maze.neighbor((0, 0), Direction.NORTH))
        self.assertIsNone(maze.neighbor((1, 1), Direction.EAST))
        self.assertEqual(maze.neighbor((0, 0), Direction.SOUTH), Position(0, 1))

    def test_carve_opens_both_sides(self) -> None:
        maze = Maze(Size(2, 2))
        target = maze.carve(Position(1, 0), Direction.SOUTH)
        self.assertEqual(target, Position(1, 1))
        self.assertFalse(maze.has_wall((1, 0), Direction.SOUTH))
        self.assertFalse(maze.has_wall((1, 1), Direction.NORTH))
        self.assertEqual(maze.passage_count(), 1)
        self.assertEqual(maze.tile((1, 1)).open_sides(), [Direction.NORTH])

    def test_carve_refuses_boundary(self) -> None:
        maze = Maze(Size(2, 2))
        with self.assertRaises(MazeError):
            maze.carve(Position(0, 0), Direction.WEST)

    def test_place_tile_respects_neighbors(self) -> None:
        maze = Maze(Size(3, 1))
        maze.carve(Position(1, 0), Direction.EAST)
        maze.place_tile(Position(1, 0), Tile(walled=False))
        tile = maze.tile((1, 0))
        # West neighbor is still walled, the boundary sides can never open
        self.assertTrue(tile.is_walled(Direction.WEST))
        self.assertFalse(tile.is_walled(Direction.EAST))
        self.assertTrue(tile.is_walled(Direction.NORTH))
        self.assertTrue(tile.is_walled(Direction.SOUTH))


class GenerateMazeTestCase(unittest.TestCase):
    def test_every_size_is_a_spanning_tree(self) -> None:
        rng = random.Random(1234)
        for width in range(1, 9):
            for height in range(1, 9):
                maze = generate_maze(Size(width, height), rng)
                seen, revisits = flood_fill(maze)
                self.assertEqual(maze.passage_count(), width * height - 1)
                self.assertEqual(len(seen), width * height)
                self.assertEqual(revisits, 0)

    def test_walls_are_symmetric_and_boundary_closed(self) -> None:
        maze = generate_maze(Size(12, 7), random.Random(7))
        for pos in maze.positions():
            for direction in Direction:
                target = maze.neighbor(pos, direction)
                if target is None:
                    self.assertTrue(maze.has_wall(pos, direction))
                else:
                    self.assertEqual(maze.has_wall(pos, direction), maze.has_wall(target, direction.opposite))

    def test_single_cell(self) -> None:
        maze = generate_maze(Size(1, 1))
        self.assertEqual(maze.passage_count(), 0)
        self.assertEqual(maze.tile((0, 0)), Tile(walled=True))

    def test_two_cells_are_joined(self) -> None:
        maze = generate_maze(Size(2, 1))
        self.assertFalse(maze.has_wall((0, 0), Direction.EAST))
        self.assertFalse(maze.has_wall((1, 0), Direction.WEST))

    def test_seeded_generation_is_reproducible(self) -> None:
        first = generate_maze(Size(9, 9), random.Random(42))
        second = generate_maze(Size(9, 9), random.Random(42))
        self.assertTrue((first.walls == second.walls).all())

    def test_carve_passages_works_in_place(self) -> None:
        maze = Maze(Size(4, 3))
        self.assertIs(carve_passages(maze, random.Random(3)), maze)
        self.assertEqual(maze.passage_count(), 11)


if __name__ == "__main__":
    unittest.main()
