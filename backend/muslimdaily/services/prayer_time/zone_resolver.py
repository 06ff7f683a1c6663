# This module will contain all functions related to resolving prayer time zones.
import math
import logging
from typing import Dict, Optional, Sequence

from ...models import GeoCoordinate, JakimZone, ZoneReferencePoint
from ...metrics import ZONE_RESOLUTIONS_TOTAL
from ...utils.errors import InvalidConfiguration
from ..helpers.constants import JAKIM_ZONES, ZONE_REFERENCE_POINTS

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371

def haversine_distance(origin: GeoCoordinate, destination: GeoCoordinate) -> float:
    """Great-circle distance between two coordinates, in kilometres."""
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(destination.latitude)
    delta_lat = lat2 - lat1
    delta_lon = math.radians(destination.longitude - origin.longitude)

    a = math.sin(delta_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))

def nearest_zone(observer: GeoCoordinate, table: Sequence[ZoneReferencePoint]) -> str:
    """
    Returns the zone ID of the reference point closest to `observer`.

    Ties are resolved in table order: only a strictly shorter distance
    replaces the current best, so the first equidistant entry wins.

    Raises:
        InvalidConfiguration: if `table` is empty.
    """
    if not table:
        raise InvalidConfiguration("Zone reference table is empty; cannot resolve a nearest zone.")

    closest = table[0]
    shortest_distance = math.inf
    for point in table:
        distance = haversine_distance(observer, point.coordinate)
        if distance < shortest_distance:
            shortest_distance = distance
            closest = point

    logger.debug(f"Nearest zone for ({observer.latitude}, {observer.longitude}) is {closest.zone_id} at {shortest_distance:.2f} km")
    return closest.zone_id

def find_containing_zone(observer: GeoCoordinate, zones: Sequence[JakimZone]) -> Optional[str]:
    """Returns the code of the first zone whose bounding box contains the observer, if any."""
    for zone in zones:
        if zone.contains(observer):
            return zone.code
    return None

def resolve_zone_for_coords(latitude: float, longitude: float, zones: Sequence[JakimZone] = JAKIM_ZONES) -> str:
    """
    Maps a coordinate to a JAKIM zone code.

    An exact bounding-box match is preferred. Coordinates that fall between
    the boxes are assigned to the zone whose centre is nearest.
    """
    observer = GeoCoordinate(latitude, longitude)

    zone_code = find_containing_zone(observer, zones)
    if zone_code:
        ZONE_RESOLUTIONS_TOTAL.labels(method='bounding_box').inc()
        logger.info(f"Coordinates {latitude}, {longitude} -> {zone_code} (bounding box match)")
        return zone_code

    if zones is JAKIM_ZONES:
        reference_points = ZONE_REFERENCE_POINTS
    else:
        reference_points = [zone.to_reference_point() for zone in zones]
    zone_code = nearest_zone(observer, reference_points)
    ZONE_RESOLUTIONS_TOTAL.labels(method='nearest').inc()
    logger.info(f"No exact match for {latitude}, {longitude} -> using closest zone {zone_code}")
    return zone_code

def is_within_service_area(latitude: float, longitude: float, bounds: Dict[str, float]) -> bool:
    """Checks the coordinate against the configured service area (Malaysia by default)."""
    return (bounds['lat_min'] <= latitude <= bounds['lat_max']
            and bounds['lon_min'] <= longitude <= bounds['lon_max'])
