import logging
import os
from dataclasses import dataclass

DEFAULT_PORT = 3001
DEFAULT_HOST = '0.0.0.0'


def parse_port(value):
    """Return ``value`` as a TCP port, or the default port if it isn't one."""
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_PORT
    if not 0 < port < 65536:
        return DEFAULT_PORT
    return port


def parse_log_level(value):
    level = logging.getLevelName(str(value or '').strip().upper())
    return level if isinstance(level, int) else logging.INFO


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        return cls(
            port=parse_port(env.get('PORT')),
            host=env.get('HOST') or DEFAULT_HOST,
            log_level=parse_log_level(env.get('LOG_LEVEL')),
        )
