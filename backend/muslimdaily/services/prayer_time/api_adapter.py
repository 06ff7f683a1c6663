# This module will contain all functions related to interacting with the prayer time API.
import datetime
from typing import Any, Dict, Optional

from flask import current_app

from ..api_adapters.base_adapter import BasePrayerAdapter
from ..api_adapters.esolat_adapter import ESolatAdapter

ADAPTERS = {
    "ESolatAdapter": ESolatAdapter,
}

def get_selected_api_adapter() -> Optional[BasePrayerAdapter]:
    """
    Instantiates and returns the API adapter based on configuration.
    """
    adapter_name = current_app.config.get('PRAYER_API_ADAPTER', "ESolatAdapter")
    base_url = current_app.config.get('PRAYER_API_BASE_URL')
    timeout = current_app.config.get('PRAYER_API_TIMEOUT', 10)

    adapter_cls = ADAPTERS.get(adapter_name)
    if not adapter_cls:
        current_app.logger.error(f"Unsupported Prayer API Adapter: {adapter_name}")
        return None

    if not base_url:
        current_app.logger.error(f"{adapter_name} base URL is not configured.")
        return None

    return adapter_cls(base_url=base_url, timeout=timeout)

def get_daily_prayer_times_from_api(zone_code: str, date_obj: datetime.date) -> Optional[Dict[str, Any]]:
    """
    Fetches prayer times for a single day directly from the API adapter.
    """
    adapter = get_selected_api_adapter()
    if not adapter:
        return None

    return adapter.fetch_daily_timings(zone_code=zone_code, date_obj=date_obj)
