"""Geocoding adapters - Implementations of AirportResolverPort.

Available implementations:
- TravelpayoutsAirportResolver: Travelpayouts widget suggestion endpoint
"""

from .travelpayouts_adapter import TravelpayoutsAirportResolver

__all__ = ["TravelpayoutsAirportResolver"]
