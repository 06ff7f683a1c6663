# This module contains the Qibla bearing and compass heading calculations.
# Everything here is a pure function: callers pass in the previous heading
# instead of the module remembering it.
import math
from typing import Optional

from ...models import GeoCoordinate

MECCA = GeoCoordinate(latitude=21.4225, longitude=39.8262)

def _same_point(a: GeoCoordinate, b: GeoCoordinate) -> bool:
    """True when both coordinates name the same place, e.g. longitude 180 and -180, or any two longitudes at a pole."""
    if a.latitude != b.latitude:
        return False
    if abs(a.latitude) == 90:
        return True
    return (a.longitude - b.longitude) % 360 == 0

def bearing_to(observer: GeoCoordinate, target: GeoCoordinate) -> float:
    """
    Returns the initial great-circle bearing from `observer` to `target`,
    in degrees clockwise from true North, normalized into [0, 360).

    The bearing is undefined when both points coincide; 0.0 is returned then.
    """
    if _same_point(observer, target):
        return 0.0

    lat1 = math.radians(observer.latitude)
    lat2 = math.radians(target.latitude)
    delta_lon = math.radians(target.longitude - observer.longitude)

    y = math.sin(delta_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(delta_lon)

    bearing = (math.degrees(math.atan2(y, x)) + 360) % 360
    # Float rounding can land exactly on 360.0 for tiny negative angles.
    return 0.0 if bearing >= 360 else bearing

def qibla_bearing(observer: GeoCoordinate) -> float:
    """Bearing from the observer toward the Kaaba in Mecca."""
    return bearing_to(observer, MECCA)

def relative_pointer_angle(bearing: float, heading: float) -> float:
    """Angle at which to draw the Qibla pointer on a device facing `heading`."""
    return (bearing - heading + 360) % 360

def heading_from_orientation(alpha: Optional[float], beta: Optional[float] = None, absolute: bool = False,
                             webkit_compass_heading: Optional[float] = None) -> Optional[float]:
    """
    Derives a compass heading from a device orientation reading.

    iOS Safari reports `webkitCompassHeading` directly. Other browsers report
    `alpha`, which is only trustworthy when the reading is absolute or the
    device is held reasonably flat (|beta| < 90). Returns None when the
    reading carries no usable heading.
    """
    if webkit_compass_heading is not None:
        heading = float(webkit_compass_heading)
    elif alpha is not None and (absolute or (beta is not None and abs(beta) < 90)):
        heading = (360 - float(alpha)) % 360
    else:
        return None

    if math.isnan(heading):
        return None
    return heading

def smooth_heading(previous: float, reading: float, smoothing: float = 0.2) -> float:
    """
    Exponentially smooths a new heading reading into the previous heading,
    taking the short way around the 0/360 boundary.
    """
    if abs(reading - previous) > 180:
        if reading > previous:
            return (previous * (1 - smoothing) + (reading - 360) * smoothing + 360) % 360
        return (previous * (1 - smoothing) + (reading + 360) * smoothing) % 360
    return previous * (1 - smoothing) + reading * smoothing
