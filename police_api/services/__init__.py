"""HTTP access to data.police.uk."""

from police_api.services.police_client import PoliceClient

__all__ = ["PoliceClient"]
