"""Geodesic calculations on Earth's surface.

Provides geographic helper functions for track editing:
- Distance calculation (Haversine formula)
- Bearing calculation (initial heading between points)
- Degree/radian conversion

All calculations use a spherical Earth approximation (R = 6,371 km).
"""

from math import atan2, cos, degrees, pi, radians, sin, sqrt

from trackshaper.constants import GeoConfig

EARTH_RADIUS_M = GeoConfig.EARTH_RADIUS_M

TWO_PI = 2 * pi


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    All methods use a spherical Earth model (R = 6,371 km).
    Coordinates are in decimal degrees (WGS84).
    Bearings are clockwise from North: radians in [0, 2π) or degrees in [0, 360).
    Distances are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def to_radians(deg: float) -> float:
        """Convert degrees to radians."""
        return radians(deg)

    @staticmethod
    def to_degrees(rad: float) -> float:
        """Convert radians to degrees."""
        return degrees(rad)

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Symmetric in its two points and exactly zero for coincident points.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters.
        """
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        # Near-antipodal pairs can round a just above 1
        a = min(1.0, a)
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))

    @staticmethod
    def initial_bearing_rad(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate initial bearing from point 1 to point 2.

        The bearing is the compass direction to travel from start to end,
        measured clockwise from true North.

        Args:
            lat1: Latitude of start point (decimal degrees)
            lon1: Longitude of start point (decimal degrees)
            lat2: Latitude of end point (decimal degrees)
            lon2: Longitude of end point (decimal degrees)

        Returns:
            Bearing in radians in [0, 2π). Coincident points give 0.0.
        """
        if lat1 == lat2 and lon1 == lon2:
            return 0.0
        lat1_rad, lat2_rad = radians(lat1), radians(lat2)
        dlon = radians(lon2 - lon1)
        y = sin(dlon) * cos(lat2_rad)
        x = cos(lat1_rad) * sin(lat2_rad) - sin(lat1_rad) * cos(lat2_rad) * cos(dlon)
        bearing = atan2(y, x) % TWO_PI
        # -0.0 % 2π and tiny negatives can round up to exactly 2π
        return 0.0 if bearing >= TWO_PI else bearing

    @staticmethod
    def initial_bearing_deg(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Initial bearing in degrees (0-360, clockwise from North)."""
        return degrees(GeoCalculator.initial_bearing_rad(lat1=lat1, lon1=lon1, lat2=lat2, lon2=lon2)) % 360

    @staticmethod
    def included_angle_rad(bearing_a: float, bearing_b: float) -> float:
        """Angle between two bearings (radians), folded into [0, π]."""
        diff = abs(bearing_a - bearing_b)
        if diff > pi:
            diff = TWO_PI - diff
        return diff
