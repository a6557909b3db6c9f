"""Tests for the directional sensor vectors."""

import numpy as np
import pytest

from gridsnake.coord import Coord, Heading
from gridsnake.engine import SnakeGame
from gridsnake.sensors import (
    SENSOR_DIRECTIONS,
    body_distance,
    food_distance,
    sensor_vector,
    wall_distance,
)


def slot(name):
    return SENSOR_DIRECTIONS.index(name)


class TestWallDistance:
    """Tests for wall_distance."""

    def test_start_position(self):
        game = SnakeGame(seed=0, size=10)
        np.testing.assert_allclose(
            wall_distance(game), [0.5, 0.4, 0.4, 0.4, 0.4, 0.4, 0.5, 0.5], rtol=1e-6
        )

    def test_top_left_corner(self, arrange):
        game = arrange([(0, 0), (1, 0)], heading=Heading.LEFT, food=(5, 5))
        np.testing.assert_allclose(
            wall_distance(game), [0.0, 0.0, 0.0, 0.0, 0.9, 0.9, 0.9, 0.0], rtol=1e-6
        )

    def test_values_in_unit_interval(self):
        game = SnakeGame(seed=0, size=7)
        values = wall_distance(game)
        assert values.shape == (8,)
        assert values.dtype == np.float32
        assert np.all(values >= 0.0) and np.all(values < 1.0)

    def test_method_matches_function(self):
        game = SnakeGame(seed=0, size=10)
        np.testing.assert_array_equal(game.wall_distance(), wall_distance(game))


class TestBodyDistance:
    """Tests for body_distance."""

    def test_start_position_sees_tail_left(self):
        game = SnakeGame(seed=0, size=10)
        np.testing.assert_allclose(
            body_distance(game), [0.1, 1, 1, 1, 1, 1, 1, 1], rtol=1e-6
        )

    def test_coiled_body(self, arrange):
        game = arrange(
            [(5, 4), (5, 5), (4, 5), (4, 4), (4, 3)], heading=Heading.UP, food=(0, 0)
        )
        np.testing.assert_allclose(
            body_distance(game), [0.1, 0.1, 1, 1, 1, 1, 0.1, 0.1], rtol=1e-6
        )

    def test_distant_segments(self, arrange):
        body = [(1, 5), (0, 5), (0, 4), (0, 3), (1, 3), (2, 3), (3, 3), (4, 3), (5, 3), (6, 3)]
        game = arrange(body, heading=Heading.RIGHT, food=(9, 9))
        np.testing.assert_allclose(
            body_distance(game), [0.1, 0.1, 0.2, 0.2, 1, 1, 1, 1], rtol=1e-6
        )

    def test_diagonal_step_is_vertical_then_horizontal(self, arrange):
        """The diagonal ray only tests the cell reached after both steps."""
        game = arrange([(5, 5), (5, 4)], heading=Heading.DOWN, food=(9, 9))
        # (5, 4) and (4, 5) are passed over on the way to (4, 4)
        game._free.remove(Coord(4, 5))
        assert body_distance(game)[slot("up_left")] == pytest.approx(1.0)

        game._free.remove(Coord(4, 4))
        assert body_distance(game)[slot("up_left")] == pytest.approx(0.1)

    def test_food_is_not_an_obstacle(self):
        game = SnakeGame(seed=0, size=10)
        game._food = Coord(7, 4)
        assert body_distance(game)[slot("right")] == pytest.approx(1.0)


class TestFoodDistance:
    """Tests for food_distance."""

    @pytest.mark.parametrize(
        "food,name,value",
        [
            ((2, 4), "left", 0.3),
            ((9, 4), "right", 0.4),
            ((5, 0), "up", 0.4),
            ((5, 9), "down", 0.5),
            ((8, 1), "up_right", 0.3),
            ((3, 2), "up_left", 0.2),
            ((3, 6), "down_left", 0.2),
            ((6, 5), "down_right", 0.1),
        ],
    )
    def test_aligned_food(self, food, name, value):
        game = SnakeGame(seed=0, size=10)
        game._food = Coord(*food)

        result = food_distance(game)

        expected = np.ones(8, dtype=np.float32)
        expected[slot(name)] = value
        np.testing.assert_allclose(result, expected, rtol=1e-6)

    @pytest.mark.parametrize("food", [(7, 5), (0, 0), (9, 9), (6, 7)])
    def test_off_axis_food_gives_no_signal(self, food):
        game = SnakeGame(seed=0, size=10)
        game._food = Coord(*food)
        np.testing.assert_array_equal(food_distance(game), np.ones(8, dtype=np.float32))


class TestSensorVector:
    """Tests for the combined feature vector."""

    def test_concatenation(self):
        game = SnakeGame(seed=5, size=10)
        combined = sensor_vector(game)
        assert combined.shape == (24,)
        assert combined.dtype == np.float32
        np.testing.assert_array_equal(combined[:8], wall_distance(game))
        np.testing.assert_array_equal(combined[8:16], body_distance(game))
        np.testing.assert_array_equal(combined[16:], food_distance(game))
        np.testing.assert_array_equal(game.sensor_vector(), combined)

    def test_sensors_do_not_mutate_state(self, arrange):
        game = arrange(
            [(5, 4), (5, 5), (4, 5), (4, 4), (4, 3)], heading=Heading.UP, food=(5, 0)
        )
        body, food, free = game.body, game.food, list(game.free_cells)
        rng_state = game._rng.bit_generator.state

        game.wall_distance()
        game.body_distance()
        game.food_distance()
        game.sensor_vector()

        assert game.body == body
        assert game.food == food
        assert list(game.free_cells) == free
        assert game._rng.bit_generator.state == rng_state
