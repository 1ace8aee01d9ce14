"""Anomaly detection over the derived road sequence.

Finds places a track editor should offer to fix:
- Abrupt gradient changes between consecutive roads
- Abrupt bearing changes (sharp bends) between consecutive roads
- Zero-length roads (duplicate points)
- Loop closure proximity of first and last point

Thresholds use strict ">" comparison: a change exactly at the threshold is
not reported. Zero-length roads never take part in abrupt change detection.
"""

import logging
from math import degrees
from typing import Optional, Sequence

from trackshaper.constants import AnomalyConfig, LoopConfig
from trackshaper.core.geo_calculator import GeoCalculator
from trackshaper.model.anomaly import (
    AbruptChange,
    AlmostLoop,
    IsALoop,
    Loopiness,
    NotALoop,
    ProblemReport,
)
from trackshaper.model.drawing import DrawingRoad
from trackshaper.model.track_model import DerivedTrack
from trackshaper.model.track_point import TrackPoint

logger = logging.getLogger(__name__)


class AnomalyDetector:
    """Static scans of a road sequence for anomalies.

    Example:
        report = AnomalyDetector.derive_problems(track=DerivedTrack.from_points(points))
        for change in report.abrupt_bearing_changes:
            print(f"Sharp bend at node {change.node.idx}")
    """

    @staticmethod
    def _adjacent_pairs(roads: Sequence[DrawingRoad]) -> list[tuple[DrawingRoad, DrawingRoad]]:
        """Consecutive road pairs where both roads have positive length."""
        return [(r1, r2) for r1, r2 in zip(roads, roads[1:]) if r1.length > 0.0 and r2.length > 0.0]

    @staticmethod
    def abrupt_gradient_changes(
        roads: Sequence[DrawingRoad],
        threshold_pct: float = AnomalyConfig.GRADIENT_THRESHOLD_DEFAULT_PCT,
    ) -> list[AbruptChange]:
        """Find nodes where gradient changes by more than threshold_pct points.

        Args:
            roads: Road sequence of a derived track
            threshold_pct: Gradient difference in percentage points

        Returns:
            One AbruptChange per flagged node, in track order.
        """
        return [
            AbruptChange(node=r1.ends_at, before=r1, after=r2)
            for r1, r2 in AnomalyDetector._adjacent_pairs(roads)
            if abs(r1.gradient - r2.gradient) > threshold_pct
        ]

    @staticmethod
    def abrupt_bearing_changes(
        roads: Sequence[DrawingRoad],
        threshold_deg: float = AnomalyConfig.BEARING_THRESHOLD_DEFAULT_DEG,
    ) -> list[AbruptChange]:
        """Find nodes where the included angle between bearings exceeds threshold_deg.

        Args:
            roads: Road sequence of a derived track
            threshold_deg: Direction change in degrees

        Returns:
            One AbruptChange per flagged node, in track order.
        """
        return [
            AbruptChange(node=r1.ends_at, before=r1, after=r2)
            for r1, r2 in AnomalyDetector._adjacent_pairs(roads)
            if degrees(GeoCalculator.included_angle_rad(bearing_a=r1.bearing, bearing_b=r2.bearing)) > threshold_deg
        ]

    @staticmethod
    def zero_length_segments(roads: Sequence[DrawingRoad]) -> list[DrawingRoad]:
        """Roads whose length is exactly zero."""
        return [road for road in roads if road.length == 0.0]

    @staticmethod
    def loopiness(first: Optional[TrackPoint], last: Optional[TrackPoint]) -> Loopiness:
        """Classify how close the track's start and end are.

        Returns:
            IsALoop if both the horizontal and the elevation gap are under
            0.5m, AlmostLoop(gap) if the horizontal gap is under 1000m,
            otherwise NotALoop. Missing points give NotALoop.
        """
        if first is None or last is None:
            return NotALoop()

        gap = first.distance_to(other=last)
        elevation_gap = abs(first.ele - last.ele)

        if gap < LoopConfig.IS_LOOP_GAP_M and elevation_gap < LoopConfig.IS_LOOP_ELEVATION_GAP_M:
            return IsALoop()
        if gap < LoopConfig.ALMOST_LOOP_GAP_M:
            return AlmostLoop(gap_m=gap)
        return NotALoop()

    @staticmethod
    def derive_problems(
        track: DerivedTrack,
        gradient_threshold_pct: float = AnomalyConfig.GRADIENT_THRESHOLD_DEFAULT_PCT,
        bearing_threshold_deg: float = AnomalyConfig.BEARING_THRESHOLD_DEFAULT_DEG,
    ) -> ProblemReport:
        """Run every detector over a derived track.

        Tracks with fewer than two points have no roads and report nothing.
        """
        if len(track.points) < 2:
            return ProblemReport()

        report = ProblemReport(
            abrupt_gradient_changes=AnomalyDetector.abrupt_gradient_changes(
                roads=track.roads, threshold_pct=gradient_threshold_pct
            ),
            abrupt_bearing_changes=AnomalyDetector.abrupt_bearing_changes(
                roads=track.roads, threshold_deg=bearing_threshold_deg
            ),
            zero_length_segments=AnomalyDetector.zero_length_segments(roads=track.roads),
            loopiness=AnomalyDetector.loopiness(first=track.first, last=track.last),
        )
        logger.debug(
            f"Problems: {len(report.abrupt_gradient_changes)} gradient, "
            f"{len(report.abrupt_bearing_changes)} bearing, "
            f"{len(report.zero_length_segments)} zero-length, {report.loopiness}"
        )
        return report
