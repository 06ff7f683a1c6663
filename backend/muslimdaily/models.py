# muslimdaily/models.py

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

PRAYER_NAMES = ("Fajr", "Dhuhr", "Asr", "Maghrib", "Isha")

# --- Geo Models ---

@dataclass(frozen=True)
class GeoCoordinate:
    latitude: float
    longitude: float

@dataclass(frozen=True)
class ZoneReferencePoint:
    """A known point tagged with the zone it belongs to."""
    coordinate: GeoCoordinate
    zone_id: str
    label: str = ""

@dataclass(frozen=True)
class JakimZone:
    """One row of the JAKIM zone table: a bounding box plus its descriptive labels."""
    code: str
    state: str
    name: str
    lat_min: float
    lat_max: float
    lng_min: float
    lng_max: float

    @property
    def center(self) -> GeoCoordinate:
        return GeoCoordinate((self.lat_min + self.lat_max) / 2, (self.lng_min + self.lng_max) / 2)

    def contains(self, coordinate: GeoCoordinate) -> bool:
        return (self.lat_min <= coordinate.latitude <= self.lat_max
                and self.lng_min <= coordinate.longitude <= self.lng_max)

    def to_reference_point(self) -> ZoneReferencePoint:
        return ZoneReferencePoint(coordinate=self.center, zone_id=self.code, label=f"{self.state}: {self.name}")

    def to_dict(self) -> Dict[str, Any]:
        center = self.center
        return {
            "code": self.code,
            "state": self.state,
            "name": self.name,
            "center": {"latitude": center.latitude, "longitude": center.longitude},
        }

# --- Prayer Time Models ---

@dataclass(frozen=True)
class PrayerSchedule:
    """Today's five prayer times. Times carry no date; they are resolved against 'today' on lookup."""
    fajr: datetime.time
    dhuhr: datetime.time
    asr: datetime.time
    maghrib: datetime.time
    isha: datetime.time
    sunrise: Optional[datetime.time] = None

    def prayers(self) -> List[Tuple[str, datetime.time]]:
        return [
            ("Fajr", self.fajr),
            ("Dhuhr", self.dhuhr),
            ("Asr", self.asr),
            ("Maghrib", self.maghrib),
            ("Isha", self.isha),
        ]

@dataclass(frozen=True)
class PrayerWindowResult:
    name: str
    time: datetime.time
    is_tomorrow: bool
    at: datetime.datetime

# --- Practice Tracking Models ---

@dataclass
class PracticeRecord:
    id: str
    type: str
    timestamp: datetime.datetime
    data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "data": self.data,
            "timestamp": self.timestamp.isoformat(),
        }

@dataclass
class PracticeUser:
    """A practice-tracking user. Created on first use, lives only in process memory."""
    id: str
    name: str
    location: str
    zone: str
    created_at: datetime.datetime
    streak: int = 0
    last_practice_date: Optional[datetime.date] = None
    practices: List[PracticeRecord] = field(default_factory=list)

    def __repr__(self):
        return f'<PracticeUser ID:{self.id} Zone:{self.zone} Streak:{self.streak}>'
