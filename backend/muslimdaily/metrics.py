# muslimdaily/metrics.py

from prometheus_client import Counter, Histogram

# Define Prometheus metrics

# Prayer Time API Metrics
PRAYER_API_REQUESTS_TOTAL = Counter('muslimdaily_prayer_api_requests_total', 'Total prayer time API requests', ['adapter_name', 'status'])
PRAYER_API_REQUEST_DURATION_SECONDS = Histogram('muslimdaily_prayer_api_request_duration_seconds', 'Prayer time API request duration in seconds', ['adapter_name'])

# Zone Resolution Metrics
ZONE_RESOLUTIONS_TOTAL = Counter('muslimdaily_zone_resolutions_total', 'Total coordinate to zone resolutions', ['method'])

# Schedule Fallback Metrics
SCHEDULE_FALLBACKS_TOTAL = Counter('muslimdaily_schedule_fallbacks_total', 'Total responses served from the default schedule', ['reason'])

# Practice Tracking Metrics
PRACTICES_TRACKED_TOTAL = Counter('muslimdaily_practices_tracked_total', 'Total practices tracked', ['practice_type'])
