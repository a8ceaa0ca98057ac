class HotelFinderError(Exception):
    """Base class for errors raised by the hotel finder."""


class NetworkError(HotelFinderError):
    """A remote call failed, timed out or returned a non-success status."""


class NotFoundError(HotelFinderError):
    """A remote service answered but had zero results."""


class ConfigError(HotelFinderError):
    """A credential needed by a remote service is missing."""


class GeocodeError(HotelFinderError):
    """No strategy could determine a location for the query."""
