"""TrackPoint - The fundamental geometry atom of a GPS track.

A TrackPoint represents a single GPS coordinate with elevation and its
position in the track. The flat list of TrackPoints is the single source of
truth; nodes, roads, summaries and anomalies are derived from it.

Used by:
- DrawingNode (wraps a TrackPoint with its projected location)
- DerivedTrack (derivation pipeline)
- Edit operations (produce new TrackPoint lists)
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from trackshaper.core.geo_calculator import GeoCalculator


@dataclass(frozen=True)
class TrackPoint:
    """A point on a track with GPS coordinates, elevation and sequence index.

    Attributes:
        lat: Latitude in decimal degrees (WGS84)
        lon: Longitude in decimal degrees (WGS84)
        ele: Elevation in meters
        idx: Position in the track, assigned by reindex(). Only valid until
            the next structural edit (insert/delete/reorder).

    Example:
        point = TrackPoint(lat=52.2, lon=0.12, ele=15.0, idx=0)
    """

    lat: float
    lon: float
    ele: float
    idx: int = 0

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if np.isnan(self.lat) or np.isnan(self.lon) or np.isnan(self.ele):
            raise ValueError(f"TrackPoint cannot have NaN values: ({self.lat}, {self.lon}, {self.ele})")

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON order."""
        return (self.lon, self.lat)

    def distance_to(self, other: "TrackPoint") -> float:
        """Great-circle distance to another point in meters (elevation ignored)."""
        return GeoCalculator.haversine_distance_m(
            lat1=self.lat,
            lon1=self.lon,
            lat2=other.lat,
            lon2=other.lon,
        )

    def bearing_to(self, other: "TrackPoint") -> float:
        """Initial bearing to another point in radians [0, 2π)."""
        return GeoCalculator.initial_bearing_rad(
            lat1=self.lat,
            lon1=self.lon,
            lat2=other.lat,
            lon2=other.lon,
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form exchanged with GPX readers/writers."""
        return {"lat": self.lat, "lon": self.lon, "ele": self.ele, "idx": self.idx}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrackPoint":
        """Create TrackPoint from dictionary. Missing elevation or idx default to 0."""
        return cls(
            lat=float(data["lat"]),
            lon=float(data["lon"]),
            ele=float(data.get("ele") or 0.0),
            idx=int(data.get("idx") or 0),
        )

    def __repr__(self) -> str:
        return f"TrackPoint(#{self.idx}, lat={self.lat:.6f}, lon={self.lon:.6f}, ele={self.ele:.1f}m)"
