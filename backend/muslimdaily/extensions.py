# muslimdaily/extensions.py

import threading
import time

from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

class InMemoryPracticeStore:
    """
    A Flask-style extension holding practice-tracking users in process memory.
    Nothing is persisted; restarting the process clears all data.
    """
    def __init__(self, app=None):
        self.lock = threading.RLock()
        self.users = {}
        self.started_at = time.time()
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Register the store on the app and reset the uptime clock."""
        app.extensions['practice_store'] = self
        self.started_at = time.time()

    def clear(self):
        with self.lock:
            self.users.clear()

    @property
    def user_count(self):
        return len(self.users)

    @property
    def practice_count(self):
        with self.lock:
            return sum(len(user.practices) for user in self.users.values())

    @property
    def uptime_seconds(self):
        return round(time.time() - self.started_at)

# Limiter extension (for rate limiting)
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per day", "50 per hour"]  # Default limits, override per route where needed
)

# In-memory practice store extension
practice_store = InMemoryPracticeStore()
