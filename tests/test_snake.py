"""Tests for snake movement, growth and collision."""

import pytest

from wrapsnake.config import DIRECTIONS, DOWN, LEFT, RIGHT, STILL, UP
from wrapsnake.grid import Cell, Grid
from wrapsnake.snake import Outcome, Snake, is_opposite


def assert_grid_matches(grid, snake):
    assert grid.count(Cell.HEAD) == 1
    assert grid.get(snake.head) == Cell.HEAD
    assert grid.count(Cell.SEGMENT) == snake.length - 1
    for pos in snake.body:
        assert grid.get(pos) == Cell.SEGMENT


class TestConstruction:
    """Initial placement."""

    def test_body_extends_to_the_right(self):
        grid = Grid(25, 25)
        snake = Snake(grid, (12, 12), 5, LEFT)
        assert snake.head == (12, 12)
        assert list(snake.body) == [(13, 12), (14, 12), (15, 12), (16, 12)]
        assert snake.length == 5
        assert snake.direction == LEFT
        assert_grid_matches(grid, snake)

    def test_truncated_at_right_edge(self):
        """A body that would run off the board is clamped, not wrapped."""
        grid = Grid(10, 10)
        snake = Snake(grid, (7, 3), 5)
        assert list(snake.body) == [(8, 3), (9, 3)]
        assert snake.length == 3
        assert grid.get((0, 3)) == Cell.EMPTY
        assert_grid_matches(grid, snake)

    def test_default_heading_is_still(self):
        snake = Snake(Grid(5, 5), (0, 0), 2)
        assert snake.direction == STILL

    def test_rejects_zero_length(self):
        with pytest.raises(ValueError):
            Snake(Grid(5, 5), (0, 0), 0)


class TestDirection:
    """Heading changes."""

    def test_reversal_rejected(self):
        snake = Snake(Grid(25, 25), (12, 12), 5, LEFT)
        snake.set_direction(RIGHT)
        assert snake.direction == LEFT

    def test_turn_accepted(self):
        snake = Snake(Grid(25, 25), (12, 12), 5, LEFT)
        snake.set_direction(UP)
        assert snake.direction == UP

    def test_all_direction_pairs(self):
        """Heading becomes d unless d is exactly -h."""
        for h in DIRECTIONS:
            for d in DIRECTIONS:
                snake = Snake(Grid(25, 25), (12, 12), 5, h)
                snake.set_direction(d)
                if d == (-h[0], -h[1]):
                    assert snake.direction == h
                else:
                    assert snake.direction == d

    def test_is_opposite(self):
        assert is_opposite(UP, DOWN)
        assert is_opposite(LEFT, RIGHT)
        assert not is_opposite(UP, LEFT)


class TestAdvance:
    """Moving, eating and colliding."""

    def test_shift_move(self):
        grid = Grid(25, 25)
        snake = Snake(grid, (12, 12), 3, LEFT)
        assert snake.advance() is Outcome.MOVED
        assert snake.head == (11, 12)
        assert list(snake.body) == [(12, 12), (13, 12)]
        assert grid.get((14, 12)) == Cell.EMPTY
        assert_grid_matches(grid, snake)

    def test_twenty_steps_left_wraps(self):
        grid = Grid(25, 25)
        snake = Snake(grid, (12, 12), 5, LEFT)
        for _ in range(20):
            assert snake.advance() is Outcome.MOVED
            assert_grid_matches(grid, snake)
        assert snake.head == ((12 - 20) % 25, 12)

    def test_wraps_vertically(self):
        grid = Grid(6, 4)
        snake = Snake(grid, (2, 0), 2, UP)
        snake.advance()
        assert snake.head == (2, 3)
        assert list(snake.body) == [(2, 0)]

    @pytest.mark.parametrize("direction", [UP, DOWN])
    def test_single_row_wraps_onto_itself(self, direction):
        """On a one-row board a vertical move lands back on the head and changes nothing."""
        grid = Grid(25, 1)
        snake = Snake(grid, (12, 0), 5, direction)
        before = grid.cells.copy()
        body = list(snake.body)

        assert snake.advance() is Outcome.MOVED
        assert snake.head == (12, 0)
        assert list(snake.body) == body
        assert (grid.cells == before).all()
        assert_grid_matches(grid, snake)

    def test_still_heading_does_not_move(self):
        grid = Grid(6, 4)
        snake = Snake(grid, (2, 2), 3)
        before = grid.cells.copy()
        assert snake.advance() is Outcome.MOVED
        assert snake.head == (2, 2)
        assert (grid.cells == before).all()

    def test_eating_grows_at_tail(self):
        """The new tail sits where the old last segment was before the move."""
        grid = Grid(25, 25)
        snake = Snake(grid, (12, 12), 5, LEFT)
        old_tail = snake.body[-1]
        grid.set((11, 12), Cell.FOOD)

        assert snake.advance() is Outcome.ATE
        assert snake.length == 6
        assert snake.head == (11, 12)
        assert snake.body[-1] == old_tail
        assert grid.count(Cell.FOOD) == 0
        assert_grid_matches(grid, snake)

    def test_lone_head_grows(self):
        grid = Grid(5, 5)
        snake = Snake(grid, (3, 3), 1, RIGHT)
        grid.set((4, 3), Cell.FOOD)
        assert snake.advance() is Outcome.ATE
        assert list(snake.body) == [(3, 3)]
        assert_grid_matches(grid, snake)

    def test_collision_with_second_segment(self):
        """Forcing the heading back into the neck collides and changes nothing."""
        grid = Grid(25, 25)
        snake = Snake(grid, (5, 5), 3, LEFT)
        snake.direction = RIGHT
        cells = grid.cells.copy()
        body = list(snake.body)

        assert snake.advance() is Outcome.COLLISION
        assert snake.head == (5, 5)
        assert list(snake.body) == body
        assert (grid.cells == cells).all()

    def test_turning_into_own_body(self):
        grid = Grid(25, 25)
        snake = Snake(grid, (5, 5), 5, LEFT)
        for direction in (UP, RIGHT):
            snake.set_direction(direction)
            assert snake.advance() is Outcome.MOVED
        snake.set_direction(DOWN)
        assert snake.advance() is Outcome.COLLISION
        assert snake.head == (6, 4)

    def test_collision_only_on_segment_cells(self):
        """Food and empty cells never collide."""
        grid = Grid(25, 25)
        snake = Snake(grid, (5, 5), 2, LEFT)
        grid.set((4, 5), Cell.FOOD)
        assert snake.advance() is not Outcome.COLLISION
        assert snake.advance() is not Outcome.COLLISION
