import time

import psutil
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily


class StateCollector:
    """Exposes an AppState and the current process as webapp_* series."""

    def __init__(self, state, process=None):
        self.state = state
        self.process = process or psutil.Process()

    def collect(self):
        snap = self.state.snapshot()
        yield CounterMetricFamily(
            'webapp_requests', 'Total number of requests', value=snap['requests'])
        yield CounterMetricFamily(
            'webapp_health_checks', 'Total number of health checks', value=snap['health_checks'])
        yield GaugeMetricFamily(
            'webapp_uptime_seconds', 'Application uptime in seconds', value=int(snap['uptime']))
        yield GaugeMetricFamily(
            'webapp_process_uptime_seconds', 'Process uptime in seconds',
            value=max(time.time() - self.process.create_time(), 0.0))
        yield GaugeMetricFamily(
            'webapp_memory_usage_bytes', 'Memory usage in bytes',
            value=self.process.memory_info().rss)
        yield GaugeMetricFamily('webapp_up', 'Application is running', value=1)


# whole-number series; generate_latest prints every sample as a float
INTEGER_SERIES = frozenset([
    'webapp_requests_total',
    'webapp_health_checks_total',
    'webapp_uptime_seconds',
    'webapp_memory_usage_bytes',
    'webapp_up',
])


def build_registry(state):
    # private registry so each app only reports its own state
    registry = CollectorRegistry(auto_describe=False)
    registry.register(StateCollector(state))
    return registry


def _integer_samples(text):
    lines = []
    for line in text.splitlines():
        name, _, value = line.partition(' ')
        if name in INTEGER_SERIES:
            line = '%s %d' % (name, int(float(value)))
        lines.append(line)
    return '\n'.join(lines) + '\n'


def render(registry):
    text = generate_latest(registry).decode('utf-8')
    return _integer_samples(text), CONTENT_TYPE_LATEST
