"""Gradient smoothing between two nodes.

Replaces the elevations of a run of nodes with a constant-slope profile,
blended against the original profile by a bumpiness factor:

    new[start]  = ele[start]
    new[i+1]    = new[i] + length(road i) * gradient / 100
    blended[i]  = bumpiness * ele[i] + (1 - bumpiness) * new[i]

Latitude and longitude are untouched, so road lengths do not change.
"""

import logging
from dataclasses import replace
from typing import Optional

from trackshaper.constants import GradientConfig
from trackshaper.model.track_model import DerivedTrack, reindex
from trackshaper.model.track_point import TrackPoint

logger = logging.getLogger(__name__)


class GradientSmoother:
    """Average gradient queries and constant-slope elevation profiles."""

    @staticmethod
    def average_gradient(track: DerivedTrack, start: int, finish: int) -> Optional[float]:
        """Average gradient in percent between two nodes.

        Returns:
            (ele[finish] - ele[start]) / distance * 100, or None if
            start >= finish, an index is out of range, or the distance is 0.
        """
        if start < 0 or finish >= len(track.points) or start >= finish:
            return None
        distance = track.distance_at(finish) - track.distance_at(start)
        if distance <= 0.0:
            return None
        return (track.points[finish].ele - track.points[start].ele) / distance * 100.0

    @staticmethod
    def smooth_gradient(
        track: DerivedTrack,
        start: int,
        finish: int,
        gradient: float,
        bumpiness: float,
    ) -> Optional[list[TrackPoint]]:
        """Apply a constant gradient between start and finish.

        Args:
            track: Derived track
            start: First node of the run (elevation kept)
            finish: Last node of the run
            gradient: Target gradient in percent
            bumpiness: 0 = fully smoothed, 1 = original elevations

        Returns:
            Reindexed full point list with the run replaced, or None unless
            0 <= start < finish < len(points) and 0 <= bumpiness <= 1.
        """
        points = track.points
        if start < 0 or finish >= len(points) or start >= finish:
            logger.debug(f"Gradient smoothing range {start}..{finish} invalid for {len(points)} points")
            return None
        if not GradientConfig.MIN_BUMPINESS <= bumpiness <= GradientConfig.MAX_BUMPINESS:
            logger.debug(f"Gradient smoothing bumpiness {bumpiness} outside 0..1")
            return None

        new_ele = points[start].ele
        adjusted: list[TrackPoint] = [points[start]]
        for road in track.roads[start:finish]:
            new_ele += road.length * gradient / 100.0
            original = points[road.index + 1]
            blended = bumpiness * original.ele + (1.0 - bumpiness) * new_ele
            adjusted.append(replace(original, ele=blended))

        return reindex(points[:start] + adjusted + points[finish + 1 :])
