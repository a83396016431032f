"""Logger utility for city generation.

All components log through child loggers of one ``SmartCity`` logger whose
handlers are set up once, from ``Logger.configure`` or from a ``Config``.
"""
import logging
import os
from datetime import datetime

ROOT_LOGGER_NAME = 'SmartCity'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Process-wide logging setup for the generator components.

    Handlers are attached lazily on the first ``get_logger`` call, using the
    settings last passed to ``configure``.
    """
    _initialized = False
    _logging_enabled = True
    _log_to_console = True
    _log_to_file = False
    _level = logging.INFO
    _directory = 'logs'

    @classmethod
    def configure(cls, logging_enabled=True, log_to_console=True, log_to_file=False, level='INFO', directory='logs'):
        """Configure global logging settings.

        Calling this after loggers were handed out rebuilds the handlers.

        Args:
            logging_enabled: Whether logging is enabled at all.
            log_to_console: Whether to write records to stderr.
            log_to_file: Whether to write records to a timestamped file.
            level: Console level name or number.
            directory: Directory for log files.
        """
        level = cls._resolve_level(level)
        cls._logging_enabled = logging_enabled
        cls._log_to_console = log_to_console
        cls._log_to_file = log_to_file
        cls._level = level
        cls._directory = directory
        if cls._initialized:
            cls._reset()
            cls._setup()

    @staticmethod
    def _resolve_level(level):
        if isinstance(level, str):
            resolved = logging.getLevelName(level.upper())
            if not isinstance(resolved, int):
                raise ValueError(f'Unknown logging level: {level!r}')
            return resolved
        if isinstance(level, bool) or not isinstance(level, int):
            raise ValueError(f'Unknown logging level: {level!r}')
        return level

    @classmethod
    def configure_from(cls, config):
        """Configure logging from the ``logging`` section of a Config.

        Args:
            config: A ``smartcity.config.Config`` instance.
        """
        cls.configure(
            logging_enabled=config.get('logging.enabled', True),
            log_to_console=config.get('logging.console', True),
            log_to_file=config.get('logging.file', False),
            level=config.get('logging.level', 'INFO'),
            directory=config.get('logging.directory', 'logs'),
        )

    @classmethod
    def _reset(cls):
        root = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        cls._initialized = False

    @classmethod
    def _setup(cls):
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(logging.DEBUG)
        formatter = logging.Formatter(LOG_FORMAT)

        if not cls._logging_enabled:
            root.addHandler(logging.NullHandler())
            root.propagate = False
            cls._initialized = True
            return

        root.propagate = True
        if cls._log_to_file:
            os.makedirs(cls._directory, exist_ok=True)
            current_time = datetime.now().strftime('%Y%m%d_%H%M%S')
            file_handler = logging.FileHandler(os.path.join(cls._directory, f'smartcity_{current_time}.log'))
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        if cls._log_to_console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(cls._level)
            console_handler.setFormatter(formatter)
            root.addHandler(console_handler)

        cls._initialized = True

    @classmethod
    def get_logger(cls, name=None):
        """Get the root generator logger or one of its children.

        Args:
            name: Optional component name, e.g. ``'ZoneGenerator'``.

        Returns:
            A ``logging.Logger``.
        """
        if not cls._initialized:
            cls._setup()
        if name:
            return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
        return logging.getLogger(ROOT_LOGGER_NAME)
