"""
Centralized logging configuration for Inkline
"""
import logging
import sys


class LoggingConfig:
    """Central logging configuration"""

    _initialized = False
    _handler = None

    @classmethod
    def setup_logging(cls, level: int = logging.INFO):
        """Attach a console handler to the ``inkline`` logger once."""
        if cls._initialized:
            return

        logger = logging.getLogger("inkline")
        logger.setLevel(level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

        cls._handler = console_handler
        cls._initialized = True
        logger.debug("Logging system initialized")

    @classmethod
    def teardown(cls):
        """Remove the console handler installed by setup_logging."""
        if cls._handler:
            logging.getLogger("inkline").removeHandler(cls._handler)
            cls._handler = None
        cls._initialized = False


__all__ = ['LoggingConfig']
