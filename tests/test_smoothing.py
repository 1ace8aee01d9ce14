"""Tests for BendSmoother and GradientSmoother.

Tests: incircle arcs between boundary roads, average gradient, gradient blending
Focus: Closed-form radii on right-angle bends, endpoint preservation, guards
"""

from math import sqrt

import pytest

from trackshaper.constants import TrackConfig
from trackshaper.core.bend_smoother import BendSmoother
from trackshaper.core.gradient_smoother import GradientSmoother
from trackshaper.model.track_model import DerivedTrack
from trackshaper.model.track_point import TrackPoint

from conftest import points_from

# Local projection length of 0.001°
LEG_M = 0.001 * TrackConfig.METRES_PER_DEGREE


class TestBendSmoother:
    """BendSmoother.bend_incircle."""

    def test_shared_corner_right_angle(self, l_shape_points: list[TrackPoint]) -> None:
        """Equal legs L at a right angle: r = L(2 - √2)/2, arc tangent to both roads."""
        track = DerivedTrack.from_points(l_shape_points)
        bend = BendSmoother.bend_incircle(track=track, n1=1, n2=3, segments=6)

        assert bend is not None
        assert bend.start_index == 1 and bend.end_index == 3
        assert bend.radius == pytest.approx(LEG_M * (2 - sqrt(2)) / 2, rel=1e-9)
        assert len(bend.track_points) == 6

        corner = track.nodes[2]
        cx, cy = bend.centre
        assert cx == pytest.approx(corner.x + bend.radius)
        assert cy == pytest.approx(corner.y - bend.radius)

        # First point on the entry road (lon 0), last on the exit road (lat 0.002)
        assert bend.track_points[0].lon == pytest.approx(0.0, abs=1e-12)
        assert bend.track_points[0].lat == pytest.approx(0.002 - bend.radius / TrackConfig.METRES_PER_DEGREE)
        assert bend.track_points[-1].lat == pytest.approx(0.002, abs=1e-12)
        assert bend.track_points[-1].lon == pytest.approx(bend.radius / TrackConfig.METRES_PER_DEGREE)

    def test_arc_points_lie_on_circle_and_bulge_to_corner(self, l_shape_points: list[TrackPoint]) -> None:
        """Every arc point is r from the centre; the middle point is nearer the corner than the centre is."""
        track = DerivedTrack.from_points(l_shape_points)
        bend = BendSmoother.bend_incircle(track=track, n1=1, n2=3, segments=5)
        assert bend is not None

        scaling = track.scaling
        cx, cy = bend.centre
        corner = track.nodes[2]
        for point in bend.track_points:
            x = (point.lon - scaling.centre_lon) * scaling.metres_per_degree
            y = (point.lat - scaling.centre_lat) * scaling.metres_per_degree
            assert sqrt((x - cx) ** 2 + (y - cy) ** 2) == pytest.approx(bend.radius)

        middle = bend.track_points[2]
        mx = (middle.lon - scaling.centre_lon) * scaling.metres_per_degree
        my = (middle.lat - scaling.centre_lat) * scaling.metres_per_degree
        assert sqrt((mx - corner.x) ** 2 + (my - corner.y) ** 2) < sqrt((cx - corner.x) ** 2 + (cy - corner.y) ** 2)

    def test_elevation_interpolated_between_tangent_points(self) -> None:
        """Entry road climbs, exit road is flat: arc elevations run monotonically between the tangents."""
        points = points_from(
            [
                (0.000, 0.000, 0.0),
                (0.001, 0.000, 10.0),
                (0.001, 0.001, 10.0),
            ]
        )
        track = DerivedTrack.from_points(points)
        bend = BendSmoother.bend_incircle(track=track, n1=0, n2=2, segments=4)
        assert bend is not None

        elevations = [p.ele for p in bend.track_points]
        assert elevations[-1] == pytest.approx(10.0)
        assert 0.0 < elevations[0] < 10.0
        assert elevations == sorted(elevations)

    def test_corner_from_line_intersection(self) -> None:
        """Boundary roads not sharing a node meet at their lines' intersection.

        Entry runs north along lon 0 from lat 0, exit runs east along lat 0.002,
        so the corner is (0.002, 0) and the triangle has legs 2L and L:
        r = L(3 - √5)/2.
        """
        points = points_from(
            [
                (0.000, 0.0000, 0.0),
                (0.001, 0.0000, 0.0),
                (0.0021, 0.0001, 0.0),
                (0.002, 0.0002, 0.0),
                (0.002, 0.0010, 0.0),
            ]
        )
        track = DerivedTrack.from_points(points)
        bend = BendSmoother.bend_incircle(track=track, n1=0, n2=4, segments=8)
        assert bend is not None
        assert bend.radius == pytest.approx(LEG_M * (3 - sqrt(5)) / 2, rel=1e-9)
        assert bend.start_index == 0 and bend.end_index == 4

    @pytest.mark.parametrize(
        "coords",
        [
            # Entry heads north from the origin; exit runs east along lat -0.001, so the lines meet behind node 0
            [(0.0, 0.0, 0.0), (0.001, 0.0, 0.0), (0.001, 0.001, 0.0), (-0.001, 0.001, 0.0), (-0.001, 0.002, 0.0)],
            # Exit runs east along lat 0.003 but stops at lon -0.001, short of the corner at lon 0
            [(0.0, 0.0, 0.0), (0.001, 0.0, 0.0), (0.002, -0.003, 0.0), (0.003, -0.002, 0.0), (0.003, -0.001, 0.0)],
        ],
    )
    def test_corner_outside_bend_rejected(self, coords: list[tuple[float, float, float]]) -> None:
        """Lines meeting before the entry start or past the exit end give None, not a reversed arc."""
        track = DerivedTrack.from_points(points_from(coords))
        assert BendSmoother.bend_incircle(track=track, n1=0, n2=4) is None

    @pytest.mark.parametrize("n1, n2", [(1, 2), (2, 2), (3, 1)])
    def test_adjacent_or_overlapping_roads_rejected(self, l_shape_points: list[TrackPoint], n1: int, n2: int) -> None:
        """n2 < n1 + 2 returns None."""
        track = DerivedTrack.from_points(l_shape_points)
        assert BendSmoother.bend_incircle(track=track, n1=n1, n2=n2) is None

    def test_out_of_range_rejected(self, l_shape_points: list[TrackPoint]) -> None:
        """Indices outside the track return None."""
        track = DerivedTrack.from_points(l_shape_points)
        assert BendSmoother.bend_incircle(track=track, n1=-1, n2=2) is None
        assert BendSmoother.bend_incircle(track=track, n1=3, n2=5) is None

    def test_too_few_segments_rejected(self, l_shape_points: list[TrackPoint]) -> None:
        """A single arc point is not a bend."""
        track = DerivedTrack.from_points(l_shape_points)
        assert BendSmoother.bend_incircle(track=track, n1=1, n2=3, segments=1) is None

    def test_straight_track_is_degenerate(self, straight_north_points: list[TrackPoint]) -> None:
        """Collinear shared corner and parallel separated roads both give None."""
        track = DerivedTrack.from_points(straight_north_points)
        assert BendSmoother.bend_incircle(track=track, n1=0, n2=2) is None
        assert BendSmoother.bend_incircle(track=track, n1=0, n2=4) is None

    def test_zero_length_boundary_rejected(self, duplicate_point_points: list[TrackPoint]) -> None:
        """A zero-length entry road has no direction."""
        track = DerivedTrack.from_points(duplicate_point_points)
        assert BendSmoother.bend_incircle(track=track, n1=1, n2=3) is None


class TestGradientSmoother:
    """GradientSmoother.average_gradient and smooth_gradient."""

    def test_average_gradient(self, straight_north_points: list[TrackPoint]) -> None:
        """10m rise over four roads."""
        track = DerivedTrack.from_points(straight_north_points)
        average = GradientSmoother.average_gradient(track=track, start=0, finish=4)
        assert average == pytest.approx(10.0 / track.summary.track_length * 100)

    @pytest.mark.parametrize("start, finish", [(2, 2), (3, 1), (-1, 2), (0, 5)])
    def test_average_gradient_invalid_range(
        self, straight_north_points: list[TrackPoint], start: int, finish: int
    ) -> None:
        """Empty, reversed or out-of-range ranges give None."""
        track = DerivedTrack.from_points(straight_north_points)
        assert GradientSmoother.average_gradient(track=track, start=start, finish=finish) is None

    def test_average_gradient_zero_length(self, duplicate_point_points: list[TrackPoint]) -> None:
        """A range covering only a zero-length road has no gradient."""
        track = DerivedTrack.from_points(duplicate_point_points)
        assert GradientSmoother.average_gradient(track=track, start=1, finish=2) is None

    def test_full_smoothing_hits_target_gradient(self, straight_north_points: list[TrackPoint]) -> None:
        """Bumpiness 0: start elevation kept, average over the range equals the target."""
        track = DerivedTrack.from_points(straight_north_points)
        smoothed = GradientSmoother.smooth_gradient(track=track, start=1, finish=4, gradient=3.0, bumpiness=0.0)

        assert len(smoothed) == len(straight_north_points)
        assert smoothed[1].ele == straight_north_points[1].ele
        assert smoothed[0] == straight_north_points[0]

        new_track = DerivedTrack.from_points(smoothed)
        assert GradientSmoother.average_gradient(track=new_track, start=1, finish=4) == pytest.approx(3.0)
        for road in new_track.roads[1:]:
            assert road.gradient == pytest.approx(3.0)

    def test_bumpiness_one_keeps_original(self, straight_north_points: list[TrackPoint]) -> None:
        """Bumpiness 1 leaves every elevation as it was."""
        track = DerivedTrack.from_points(straight_north_points)
        smoothed = GradientSmoother.smooth_gradient(track=track, start=0, finish=4, gradient=-5.0, bumpiness=1.0)
        assert [p.ele for p in smoothed] == [p.ele for p in straight_north_points]

    def test_bumpiness_blends(self, straight_north_points: list[TrackPoint]) -> None:
        """Bumpiness 0.5 lands halfway between original and smoothed."""
        track = DerivedTrack.from_points(straight_north_points)
        full = GradientSmoother.smooth_gradient(track=track, start=0, finish=4, gradient=0.0, bumpiness=0.0)
        half = GradientSmoother.smooth_gradient(track=track, start=0, finish=4, gradient=0.0, bumpiness=0.5)
        for original, smooth, blended in zip(straight_north_points, full, half):
            assert blended.ele == pytest.approx((original.ele + smooth.ele) / 2)
        assert all(p.ele == 100.0 for p in full)

    @pytest.mark.parametrize("start, finish", [(3, 1), (2, 2), (-1, 2), (1, 9)])
    def test_smooth_gradient_invalid_range(
        self, straight_north_points: list[TrackPoint], start: int, finish: int
    ) -> None:
        """Reversed, empty or out-of-range runs give None instead of a reshaped track."""
        track = DerivedTrack.from_points(straight_north_points)
        smoothed = GradientSmoother.smooth_gradient(track=track, start=start, finish=finish, gradient=2.0, bumpiness=0.0)
        assert smoothed is None

    @pytest.mark.parametrize("bumpiness", [-0.5, 1.01])
    def test_smooth_gradient_invalid_bumpiness(self, straight_north_points: list[TrackPoint], bumpiness: float) -> None:
        """Bumpiness outside 0..1 gives None."""
        track = DerivedTrack.from_points(straight_north_points)
        smoothed = GradientSmoother.smooth_gradient(track=track, start=0, finish=4, gradient=2.0, bumpiness=bumpiness)
        assert smoothed is None

    def test_horizontal_position_unchanged(self, straight_north_points: list[TrackPoint]) -> None:
        """Only elevation changes."""
        track = DerivedTrack.from_points(straight_north_points)
        smoothed = GradientSmoother.smooth_gradient(track=track, start=0, finish=3, gradient=1.0, bumpiness=0.0)
        assert [p.lat_lon for p in smoothed] == [p.lat_lon for p in straight_north_points]
        assert [p.idx for p in smoothed] == [0, 1, 2, 3, 4]
