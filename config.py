import logging
import os
from dataclasses import dataclass
from typing import Optional

import pytz
import yaml

from locales import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

CONFIG_PATH = 'config.yaml'

DEFAULTS = {
    'api_url': 'http://127.0.0.1:5000',
    'locale': DEFAULT_LOCALE,
    'timezone': None,
    'timeout': 10.0,
    'log_level': 'WARNING',
}

class ConfigError(Exception):
    """Raised when the configuration file or a value in it is unusable."""

@dataclass
class Config:
    api_url: str = DEFAULTS['api_url']
    locale: str = DEFAULTS['locale']
    timezone: Optional[str] = None
    timeout: float = DEFAULTS['timeout']
    log_level: str = DEFAULTS['log_level']

    @property
    def tz(self):
        """pytz zone for the configured timezone, or None for local time."""
        if not self.timezone:
            return None
        return pytz.timezone(self.timezone)

def load_config(path=None):
    """Load config.yaml merged over the defaults, then apply env overrides."""
    path = path or CONFIG_PATH
    values = dict(DEFAULTS)
    if os.path.exists(path):
        try:
            with open(path, 'r') as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read {path}: {e}") from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"{path} must contain a mapping")
        values.update({k: v for k, v in loaded.items() if k in DEFAULTS})
    else:
        logger.debug("No config file at %s, using defaults", path)

    # Environment wins over the file
    if os.environ.get('MEETINGS_API_URL'):
        values['api_url'] = os.environ['MEETINGS_API_URL']
    if os.environ.get('MEETINGS_LOCALE'):
        values['locale'] = os.environ['MEETINGS_LOCALE']

    try:
        values['timeout'] = float(values['timeout'])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout: {values['timeout']!r}") from e

    if values['timezone']:
        try:
            pytz.timezone(values['timezone'])
        except pytz.UnknownTimeZoneError as e:
            raise ConfigError(f"Unknown timezone: {values['timezone']}") from e

    values['api_url'] = str(values['api_url']).rstrip('/')
    return Config(**values)
