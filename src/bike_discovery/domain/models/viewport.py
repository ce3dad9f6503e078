"""Map viewport domain models."""

from pydantic import BaseModel, ConfigDict


class Bounds(BaseModel):
    """Bounding box in degrees, west/south/east/north."""

    model_config = ConfigDict(frozen=True)

    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    @property
    def is_degenerate(self) -> bool:
        """Return True when the box has zero area (single point or a line)."""
        return self.min_lon == self.max_lon or self.min_lat == self.max_lat

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return (min_lon, min_lat, max_lon, max_lat)."""
        return (self.min_lon, self.min_lat, self.max_lon, self.max_lat)


class ZoomConfig(BaseModel):
    """Camera limits used when fitting a result set."""

    model_config = ConfigDict(frozen=True)

    max_zoom: int
    padding_px: int


class ViewportSpec(BaseModel):
    """Everything the map needs to frame a result set."""

    model_config = ConfigDict(frozen=True)

    bounds: Bounds | None = None
    max_zoom: int
    padding_px: int
