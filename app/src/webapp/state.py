import threading
import time


class AppState:
    """Request counters and start time for a single server process."""

    def __init__(self):
        self._lock = threading.Lock()
        self.request_count = 0
        self.health_check_count = 0
        self.start_time = time.time()
        self._started = time.monotonic()

    def count_request(self):
        with self._lock:
            self.request_count += 1
            return self.request_count

    def count_health_check(self):
        with self._lock:
            self.health_check_count += 1
            return self.health_check_count

    def uptime(self):
        """Seconds since the state was created, from the monotonic clock."""
        return time.monotonic() - self._started

    def snapshot(self):
        with self._lock:
            return {
                'requests': self.request_count,
                'health_checks': self.health_check_count,
                'uptime': self.uptime(),
            }
