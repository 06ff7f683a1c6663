# muslimdaily/routes/qibla_routes.py

from flask import current_app
from flask_smorest import Blueprint

from ..models import GeoCoordinate
from ..schemas import CompassPointerSchema, CompassReadingSchema, QiblaArgsSchema, QiblaSchema
from ..services.geo.qibla import (
    MECCA,
    heading_from_orientation,
    qibla_bearing,
    relative_pointer_angle,
    smooth_heading,
)
from ..services.prayer_time.zone_resolver import haversine_distance

qibla_bp = Blueprint(
    'Qibla',
    __name__,
    url_prefix='/api/qibla',
    description="Qibla direction and compass pointer calculations."
)

@qibla_bp.route('')
@qibla_bp.arguments(QiblaArgsSchema, location='query')
@qibla_bp.response(200, QiblaSchema)
def qibla_direction(args):
    """
    Get the Qibla bearing for a location.

    If the device `heading` is supplied, the angle at which to draw the
    on-screen pointer is returned as `relativeAngle`.
    """
    observer = GeoCoordinate(args['lat'], args['lon'])
    bearing = qibla_bearing(observer)

    result = {
        "bearing": round(bearing, 2),
        "qiblaDirection": round(bearing) % 360,
        "distanceKm": round(haversine_distance(observer, MECCA), 1),
    }
    if args.get('heading') is not None:
        result["relativeAngle"] = round(relative_pointer_angle(bearing, args['heading']), 2)
    return result

@qibla_bp.route('/pointer', methods=['POST'])
@qibla_bp.arguments(CompassReadingSchema)
@qibla_bp.response(200, CompassPointerSchema)
def compass_pointer(reading):
    """
    Turn a raw device orientation reading into a smoothed heading and pointer angle.

    The caller sends back the heading it last displayed as `previousHeading`.
    Readings without a usable heading keep the previous heading.
    """
    observer = GeoCoordinate(reading['lat'], reading['lon'])
    bearing = qibla_bearing(observer)
    previous = reading['previousHeading']

    raw_heading = heading_from_orientation(
        reading.get('alpha'),
        beta=reading.get('beta'),
        absolute=reading.get('absolute', False),
        webkit_compass_heading=reading.get('webkitCompassHeading'),
    )

    if raw_heading is None:
        current_app.logger.debug("Compass reading carried no usable heading; keeping previous heading.")
        heading = previous
    else:
        heading = smooth_heading(previous, raw_heading, current_app.config.get('COMPASS_SMOOTHING', 0.2))

    return {
        "usable": raw_heading is not None,
        "heading": round(heading, 2),
        "rawHeading": raw_heading,
        "bearing": round(bearing, 2),
        "relativeAngle": round(relative_pointer_angle(bearing, heading), 2),
    }
