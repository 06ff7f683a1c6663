# muslimdaily/utils/errors.py

class InvalidConfiguration(ValueError):
    """Raised when static reference data (e.g. the zone table) is unusable. Indicates a deployment bug."""

class InvalidTimeFormat(ValueError):
    """Raised when a TimeOfDay string is in neither a 12-hour nor a 24-hour format."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unrecognized time format: {value!r}")

class PrayerTimeSourceError(RuntimeError):
    """Raised when no usable prayer schedule could be produced and fallback is disabled."""
