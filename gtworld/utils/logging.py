"""
Logging helpers for the world codec.

Modules log through ``logging.getLogger(__name__)`` or, once a world name is
known, through a WorldLogAdapter so every message carries the world it came
from. The package never installs handlers; applications configure logging.
"""
import logging
from typing import Union


class WorldLogAdapter(logging.LoggerAdapter):
    """Appends world context (name, tile index, ...) to log messages"""

    def process(self, msg, kwargs):
        if self.extra:
            context_str = ' '.join(f'{k}={v}' for k, v in self.extra.items())
            msg = f'{msg} [{context_str}]'
        return msg, kwargs

    def bind(self, **context) -> 'WorldLogAdapter':
        """Return an adapter with extra context added"""
        return WorldLogAdapter(self.logger, {**self.extra, **context})


def get_logger(name: str, **context) -> Union[logging.Logger, WorldLogAdapter]:
    """
    Get a logger, wrapped with context when any is given

    Args:
        name: Logger name
        **context: Context key-value pairs, e.g. world='START'
    """
    logger = logging.getLogger(name)
    if context:
        return WorldLogAdapter(logger, context)
    return logger
