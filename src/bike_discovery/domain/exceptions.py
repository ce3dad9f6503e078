"""Domain exceptions for bike network discovery."""


class BikeDiscoveryError(Exception):
    """Base class for all discovery related errors."""


class InvalidCoordinateError(BikeDiscoveryError, ValueError):
    """Raised when a latitude/longitude pair is not a valid position on Earth."""

    def __init__(self, latitude: object, longitude: object, reason: str) -> None:
        super().__init__(f"Invalid coordinates ({latitude}, {longitude}): {reason}")
        self.latitude = latitude
        self.longitude = longitude
        self.reason = reason


class NetworkNotFoundError(BikeDiscoveryError):
    """Raised when a network has no detail available from the data source."""

    def __init__(self, network_id: str) -> None:
        super().__init__(f"Network not found: {network_id}")
        self.network_id = network_id
