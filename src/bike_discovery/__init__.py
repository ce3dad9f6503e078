"""Bike-sharing network discovery: filtering, proximity search, paging and map framing."""

__version__ = "0.1.0"
