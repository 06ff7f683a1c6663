# muslimdaily/services/api_adapters/esolat_adapter.py

import requests
from flask import current_app # To access app.logger and app.config
from .base_adapter import BasePrayerAdapter
from ..helpers.constants import ESOLAT_TIMING_KEYS
from ...metrics import PRAYER_API_REQUESTS_TOTAL, PRAYER_API_REQUEST_DURATION_SECONDS

class ESolatAdapter(BasePrayerAdapter):
    """
    API Adapter for the JAKIM e-Solat prayer times API (e-solat.gov.my).
    """

    name = "ESolatAdapter"

    def fetch_daily_timings(self, zone_code, date_obj):
        """
        Fetches prayer times for a single day in a JAKIM zone.
        """
        date_str = date_obj.strftime("%Y-%m-%d")
        current_app.logger.info(f"ESolatAdapter: Fetching daily timings for {date_str} in zone {zone_code}")

        endpoint = f"{self.base_url}/index.php"
        params = {
            "r": "esolatApi/takwimsolat",
            "period": "date",
            "zone": zone_code,
            "date": date_str,
        }

        current_app.logger.debug(f"ESolatAdapter: Fetching daily with params: {params}")

        try:
            with PRAYER_API_REQUEST_DURATION_SECONDS.labels(adapter_name=self.name).time():
                response = requests.get(endpoint, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout:
            PRAYER_API_REQUESTS_TOTAL.labels(adapter_name=self.name, status='timeout').inc()
            current_app.logger.error(f"ESolatAdapter: Timeout error fetching daily prayer times for {zone_code} on {date_str}.")
            return None
        except requests.exceptions.RequestException as e:
            PRAYER_API_REQUESTS_TOTAL.labels(adapter_name=self.name, status='error').inc()
            current_app.logger.error(f"ESolatAdapter: RequestException for {zone_code} on {date_str}: {e}", exc_info=True)
            return None
        except ValueError as e:
            PRAYER_API_REQUESTS_TOTAL.labels(adapter_name=self.name, status='invalid_json').inc()
            current_app.logger.error(f"ESolatAdapter: Could not decode response for {zone_code} on {date_str}: {e}")
            return None

        prayer_time = data.get("prayerTime") if isinstance(data, dict) else None
        if not prayer_time:
            PRAYER_API_REQUESTS_TOTAL.labels(adapter_name=self.name, status='empty').inc()
            current_app.logger.error(f"ESolatAdapter: No prayer times found for {zone_code} on {date_str}. Status: {data.get('status') if isinstance(data, dict) else None}")
            return None

        times = prayer_time[0]
        PRAYER_API_REQUESTS_TOTAL.labels(adapter_name=self.name, status='success').inc()
        current_app.logger.info(f"ESolatAdapter: Successfully fetched daily timings for {zone_code} on {date_str}.")
        return {
            "date": times.get("date", date_str),
            "zone": data.get("zone", zone_code),
            "timings": {
                standard_key: times[esolat_key]
                for esolat_key, standard_key in ESOLAT_TIMING_KEYS.items()
                if times.get(esolat_key)
            },
        }
