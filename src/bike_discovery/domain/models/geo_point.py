"""Geographic point domain model."""

import math
from dataclasses import dataclass

from bike_discovery.domain.exceptions import InvalidCoordinateError


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Reject NaN and out-of-range coordinates."""
        if math.isnan(self.latitude) or math.isnan(self.longitude):
            raise InvalidCoordinateError(self.latitude, self.longitude, "coordinate is NaN")
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidCoordinateError(
                self.latitude, self.longitude, "latitude must be within [-90, 90]"
            )
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidCoordinateError(
                self.latitude, self.longitude, "longitude must be within [-180, 180]"
            )
