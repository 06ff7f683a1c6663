# muslimdaily/schemas.py

from marshmallow import Schema, fields, validate

TIME_FORMATS = ("12h", "24h")

class MessageSchema(Schema):
    message = fields.Str(required=True)

# --- Prayer Times ---

class TimeFormatArgsSchema(Schema):
    format = fields.Str(validate=validate.OneOf(TIME_FORMATS))

class NextPrayerSchema(Schema):
    name = fields.Str(required=True)
    time = fields.Str(required=True)
    isTomorrow = fields.Bool(required=True)
    at = fields.Str(required=True)

class CoordinatesSchema(Schema):
    latitude = fields.Float(required=True)
    longitude = fields.Float(required=True)

class PrayerTimesDataSchema(Schema):
    fajr = fields.Str(required=True)
    sunrise = fields.Str(required=True)
    dhuhr = fields.Str(required=True)
    asr = fields.Str(required=True)
    maghrib = fields.Str(required=True)
    isha = fields.Str(required=True)
    date = fields.Str(required=True)
    zone = fields.Str(required=True)
    coordinates = fields.Nested(CoordinatesSchema)
    nextPrayer = fields.Nested(NextPrayerSchema, required=True)
    currentPrayer = fields.Str(allow_none=True)

class PrayerTimesResponseSchema(Schema):
    success = fields.Bool(required=True)
    data = fields.Nested(PrayerTimesDataSchema, required=True)
    source = fields.Str(required=True)

class ZoneCenterSchema(Schema):
    latitude = fields.Float()
    longitude = fields.Float()

class ZoneSchema(Schema):
    code = fields.Str()
    state = fields.Str()
    name = fields.Str()
    center = fields.Nested(ZoneCenterSchema)

class NextPrayerArgsSchema(TimeFormatArgsSchema):
    """Query parameters for resolving the next prayer from a caller-supplied schedule."""
    fajr = fields.Str(required=True)
    dhuhr = fields.Str(required=True)
    asr = fields.Str(required=True)
    maghrib = fields.Str(required=True)
    isha = fields.Str(required=True)
    now = fields.DateTime()

class LegacyPrayerTimesSchema(Schema):
    fajr = fields.Str()
    dhuhr = fields.Str()
    asr = fields.Str()
    maghrib = fields.Str()
    isha = fields.Str()
    source = fields.Str()
    zone = fields.Str()
    date = fields.Str()

# --- Qibla ---

class QiblaArgsSchema(Schema):
    lat = fields.Float(required=True, validate=validate.Range(min=-90, max=90))
    lon = fields.Float(required=True, validate=validate.Range(min=-180, max=180))
    heading = fields.Float(validate=validate.Range(min=0, max=360))

class QiblaSchema(Schema):
    bearing = fields.Float(required=True)
    qiblaDirection = fields.Int(required=True)
    distanceKm = fields.Float(required=True)
    relativeAngle = fields.Float()

class CompassReadingSchema(Schema):
    """A raw device orientation reading plus the heading the caller last displayed."""
    lat = fields.Float(required=True, validate=validate.Range(min=-90, max=90))
    lon = fields.Float(required=True, validate=validate.Range(min=-180, max=180))
    alpha = fields.Float(allow_none=True, load_default=None)
    beta = fields.Float(allow_none=True, load_default=None)
    absolute = fields.Bool(load_default=False)
    webkitCompassHeading = fields.Float(allow_none=True, load_default=None)
    previousHeading = fields.Float(load_default=0.0, validate=validate.Range(min=0, max=360))

class CompassPointerSchema(Schema):
    usable = fields.Bool(required=True)
    heading = fields.Float(required=True)
    rawHeading = fields.Float(allow_none=True)
    bearing = fields.Float(required=True)
    relativeAngle = fields.Float(required=True)

# --- Practice Tracking ---

class TrackPracticeSchema(Schema):
    userId = fields.Str(required=True, validate=validate.Length(min=1))
    practiceType = fields.Str(required=True, validate=validate.Length(min=1))
    practiceData = fields.Dict(allow_none=True, load_default=None)

class UntrackPracticeSchema(Schema):
    userId = fields.Str(required=True, validate=validate.Length(min=1))
    practiceType = fields.Str(required=True, validate=validate.Length(min=1))

class PracticeSchema(Schema):
    id = fields.Str()
    type = fields.Str()
    data = fields.Dict(allow_none=True)
    timestamp = fields.Str()

class TrackPracticeResponseSchema(Schema):
    success = fields.Bool(required=True)
    message = fields.Str(required=True)
    streak = fields.Int(required=True)
    practice = fields.Nested(PracticeSchema)

class ProgressUserSchema(Schema):
    id = fields.Str()
    streak = fields.Int()
    totalPractices = fields.Int()

class TodayProgressSchema(Schema):
    date = fields.Str()
    practices = fields.List(fields.Nested(PracticeSchema))
    counts = fields.Dict(keys=fields.Str(), values=fields.Int())
    prayersCompleted = fields.Int()

class ProgressSchema(Schema):
    user = fields.Nested(ProgressUserSchema)
    today = fields.Nested(TodayProgressSchema)
    streak = fields.Int()

class WeeklyProgressDaySchema(Schema):
    date = fields.Str()
    day = fields.Str()
    completed = fields.Int()
    total = fields.Int()
