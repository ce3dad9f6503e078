"""Discovery result domain model."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from bike_discovery.domain.models.page import Page
from bike_discovery.domain.models.viewport import ViewportSpec

T = TypeVar("T")


@dataclass(frozen=True)
class DiscoveryResult(Generic[T]):
    """A page to render plus the camera to frame it with."""

    page: Page[T]
    viewport: ViewportSpec
    search_radius_km: float = 0.0
