"""Unit tests for shadowcasting field of view."""

import pytest

from hexgrid.domain.rules_config import RulesConfig, VisibilityRules
from hexgrid.domain.visibility import (
    Shadow,
    calculate_field_of_view,
    cast_shadow,
    is_shaded,
    normalize_angle,
)
from hexgrid.models.coordinates import CubeCoordinates, InvalidArgumentsError
from hexgrid.models.grid import hexagon_grid
from hexgrid.utils.hex_math import filled_ring

# ring 1 walk starts at (-1, 1, 0), ring 2 walk starts at (-2, 2, 0)
WEST_NEIGHBOR = CubeCoordinates(x=-1, y=1, z=0)
NORTH_NEIGHBOR = CubeCoordinates(x=0, y=1, z=-1)


class TestNormalizeAngle:
    def test_within_range(self):
        assert normalize_angle(45.0) == 45.0

    def test_negative(self):
        assert normalize_angle(-30.0) == 330.0

    def test_overflow(self):
        assert normalize_angle(370.0) == 10.0

    def test_full_circle_wraps_to_zero(self):
        assert normalize_angle(360.0) == 0.0


class TestCastShadow:
    """Tests for shadow interval merging."""

    def test_first_shadow(self):
        shadows: set[Shadow] = set()
        cast_shadow(shadows, 30.0, 90.0)
        assert shadows == {Shadow(30.0, 90.0)}

    def test_disjoint_shadows_kept_apart(self):
        shadows: set[Shadow] = set()
        cast_shadow(shadows, 30.0, 90.0)
        cast_shadow(shadows, 150.0, 210.0)
        assert shadows == {Shadow(30.0, 90.0), Shadow(150.0, 210.0)}

    def test_overlapping_shadows_merge(self):
        shadows = {Shadow(30.0, 90.0)}
        cast_shadow(shadows, 75.0, 105.0)
        assert shadows == {Shadow(30.0, 105.0)}

    def test_touching_shadows_merge(self):
        shadows = {Shadow(30.0, 90.0)}
        cast_shadow(shadows, 90.0, 150.0)
        assert shadows == {Shadow(30.0, 150.0)}

    def test_bridging_shadow_merges_both(self):
        shadows = {Shadow(0.0, 30.0), Shadow(60.0, 90.0)}
        cast_shadow(shadows, 20.0, 70.0)
        assert shadows == {Shadow(0.0, 90.0)}

    def test_wraparound_splits(self):
        shadows: set[Shadow] = set()
        cast_shadow(shadows, -30.0, 30.0)
        assert shadows == {Shadow(330.0, 360.0), Shadow(0.0, 30.0)}

    def test_shadows_stay_disjoint(self):
        shadows: set[Shadow] = set()
        for low in (0.0, 50.0, 100.0, 40.0, 300.0, -10.0):
            cast_shadow(shadows, low, low + 20.0)
        ordered = sorted(shadows, key=lambda s: s.min_angle)
        for left, right in zip(ordered, ordered[1:]):
            assert not left.overlaps(right)


class TestIsShaded:
    """Tests for the two shading modes."""

    def test_center_mode(self):
        shadows = {Shadow(30.0, 90.0)}
        assert is_shaded(shadows, 15.0, 30.0, 45.0, include_partially_visible=False)
        assert not is_shaded(shadows, 90.0, 105.0, 120.0, include_partially_visible=False)

    def test_partial_mode_requires_whole_slice(self):
        shadows = {Shadow(30.0, 90.0)}
        assert not is_shaded(shadows, 15.0, 30.0, 45.0, include_partially_visible=True)
        assert is_shaded(shadows, 45.0, 60.0, 75.0, include_partially_visible=True)

    def test_partial_mode_wraparound_slice(self):
        """A slice straddling 0 degrees is tested with its normalized bounds."""
        shadows = {Shadow(330.0, 360.0)}
        assert is_shaded(shadows, -15.0, 0.0, 15.0, include_partially_visible=True)

    def test_no_shadows(self):
        assert not is_shaded(set(), 0.0, 10.0, 20.0, include_partially_visible=False)


class TestCalculateFieldOfView:
    """Tests for calculate_field_of_view."""

    def test_radius_zero(self, origin, open_grid):
        assert calculate_field_of_view(origin, 0, open_grid) == {origin}

    def test_negative_radius_raises(self, origin, open_grid):
        with pytest.raises(InvalidArgumentsError, match="Radius can't be less than zero"):
            calculate_field_of_view(origin, -1, open_grid)

    def test_radius_two_without_obstacles(self, origin, open_grid):
        result = calculate_field_of_view(origin, 2, open_grid)
        assert len(result) == 19
        assert result == filled_ring(origin, 2)

    @pytest.mark.parametrize("radius", [1, 3, 4, 5])
    def test_no_obstacles_matches_filled_ring(self, origin, open_grid, radius):
        assert calculate_field_of_view(origin, radius, open_grid) == filled_ring(origin, radius)

    def test_restricted_to_grid(self, origin):
        grid = hexagon_grid(2)
        assert calculate_field_of_view(origin, 4, grid) == filled_ring(origin, 2)

    def test_opaque_neighbor_hides_cells_behind(self, origin, open_grid):
        """An opaque hex at 30-90 degrees hides the three ring 2 hexes centered there."""
        open_grid.set_opaque(NORTH_NEIGHBOR)

        result = calculate_field_of_view(origin, 2, open_grid)

        hidden = {
            CubeCoordinates(x=-1, y=2, z=-1),
            CubeCoordinates(x=0, y=2, z=-2),
            CubeCoordinates(x=1, y=1, z=-2),
        }
        assert NORTH_NEIGHBOR in result
        assert result == filled_ring(origin, 2) - hidden

    def test_partial_visibility_shows_edge_cells(self, origin, open_grid):
        """Hexes only partly inside the 30-90 degree shadow stay visible."""
        open_grid.set_opaque(NORTH_NEIGHBOR)

        result = calculate_field_of_view(origin, 2, open_grid, include_partially_visible=True)

        # The first hex of the ring straddles 0 degrees, its slice normalizes
        # to [345, 15] and passes both bound checks against [30, 90].
        hidden = {CubeCoordinates(x=0, y=2, z=-2), CubeCoordinates(x=-2, y=2, z=0)}
        assert result == filled_ring(origin, 2) - hidden
        assert CubeCoordinates(x=-1, y=2, z=-1) in result
        assert CubeCoordinates(x=1, y=1, z=-2) in result

    def test_shadow_across_zero_degrees(self, origin, open_grid):
        """The first hex of the walk casts a shadow split at 0 degrees."""
        open_grid.set_opaque(WEST_NEIGHBOR)

        result = calculate_field_of_view(origin, 2, open_grid)

        hidden = {
            CubeCoordinates(x=-2, y=2, z=0),
            CubeCoordinates(x=-1, y=2, z=-1),
            CubeCoordinates(x=-2, y=1, z=1),
        }
        assert result == filled_ring(origin, 2) - hidden

    def test_shadow_extends_to_further_rings(self, origin, open_grid):
        open_grid.set_opaque(NORTH_NEIGHBOR)

        result = calculate_field_of_view(origin, 5, open_grid)

        # straight behind the opaque hex along the same bearing
        for distance_from_origin in range(2, 6):
            behind = CubeCoordinates(x=0, y=distance_from_origin, z=-distance_from_origin)
            assert behind not in result

    def test_surrounded_viewer_sees_only_ring_one(self, origin, open_grid):
        for coord in filled_ring(origin, 1) - {origin}:
            open_grid.set_opaque(coord)

        result = calculate_field_of_view(origin, 4, open_grid)

        assert result == filled_ring(origin, 1)

    def test_rules_default_partial_flag(self, origin, open_grid):
        open_grid.set_opaque(NORTH_NEIGHBOR)
        rules = RulesConfig(visibility=VisibilityRules(include_partially_visible=True))

        assert calculate_field_of_view(origin, 2, open_grid, rules=rules) == (
            calculate_field_of_view(origin, 2, open_grid, include_partially_visible=True)
        )

    def test_opaque_origin_does_not_blind(self, origin, open_grid):
        open_grid.set_opaque(origin)
        assert calculate_field_of_view(origin, 2, open_grid) == filled_ring(origin, 2)


class TestLargeRadius:
    """Rings from 7 outward have slice widths that do not divide 360 evenly."""

    # last hex of the ring 1 walk, its shadow spans 270-330 degrees
    SOUTH_WEST_NEIGHBOR = CubeCoordinates(x=-1, y=0, z=1)

    @pytest.mark.parametrize("radius", [7, 8, 9])
    def test_no_obstacles_matches_filled_ring(self, origin, radius):
        grid = hexagon_grid(9)
        assert calculate_field_of_view(origin, radius, grid) == filled_ring(origin, radius)

    def test_bearing_behind_opaque_neighbor_stays_hidden(self, origin):
        grid = hexagon_grid(9)
        grid.set_opaque(self.SOUTH_WEST_NEIGHBOR)

        result = calculate_field_of_view(origin, 9, grid)

        assert self.SOUTH_WEST_NEIGHBOR in result
        for distance_from_origin in range(2, 10):
            behind = CubeCoordinates(x=-distance_from_origin, y=0, z=distance_from_origin)
            assert behind not in result

    def test_last_hex_of_ring_seven_keeps_its_bearing(self, origin):
        """The final hex of the ring 7 walk sits near 351 degrees, outside the shadow."""
        grid = hexagon_grid(9)
        grid.set_opaque(self.SOUTH_WEST_NEIGHBOR)

        result = calculate_field_of_view(origin, 7, grid)

        assert CubeCoordinates(x=-7, y=6, z=1) in result
        assert CubeCoordinates(x=-7, y=7, z=0) in result
