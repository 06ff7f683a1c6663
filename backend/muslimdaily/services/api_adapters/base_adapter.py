# This module defines the base interface for all prayer time API adapters.
from abc import ABC, abstractmethod

class BasePrayerAdapter(ABC):
    """
    Abstract base class for prayer time API adapters. It ensures that all adapters
    adhere to a common interface, returning data in a standardized format:

        {"date": str, "zone": str, "timings": {"Fajr": "05:46:00", "Sunrise": ..., ...}}
    """

    name = "BasePrayerAdapter"

    def __init__(self, base_url, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    @abstractmethod
    def fetch_daily_timings(self, zone_code, date_obj):
        """Fetches prayer times for a single day in a zone and returns them in a standardized format."""
        pass
