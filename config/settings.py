"""Configuration management for bankdemo."""
import logging
import os
from dataclasses import dataclass

from tabulate import tabulate_formats

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off', '')


@dataclass
class Settings:
    """Configuration settings for the bank demo scripts.

    Every field has a default, so the scripts run without any environment
    set up. ``Settings.load`` overrides the defaults from BANKDEMO_* variables.
    """

    # Logging Configuration
    log_file: str = 'bankdemo.log'
    log_level: str = 'INFO'

    # Console Output
    currency_symbol: str = '$'
    show_summary: bool = False
    table_format: str = 'simple'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        defaults = cls()

        log_level = os.getenv('BANKDEMO_LOG_LEVEL', defaults.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"BANKDEMO_LOG_LEVEL must be a logging level name, got {log_level!r}")

        show_summary = os.getenv('BANKDEMO_SHOW_SUMMARY', '').strip().lower()
        if show_summary not in _TRUE_VALUES + _FALSE_VALUES:
            raise ValueError(f"BANKDEMO_SHOW_SUMMARY must be a boolean, got {show_summary!r}")

        table_format = os.getenv('BANKDEMO_TABLE_FORMAT', defaults.table_format)
        if table_format not in tabulate_formats:
            raise ValueError(f"BANKDEMO_TABLE_FORMAT is not a tabulate format: {table_format!r}")

        return cls(
            log_file=os.getenv('BANKDEMO_LOG_FILE', defaults.log_file),
            log_level=log_level,
            currency_symbol=os.getenv('BANKDEMO_CURRENCY_SYMBOL', defaults.currency_symbol),
            show_summary=show_summary in _TRUE_VALUES,
            table_format=table_format,
        )

    def configure_logging(self) -> logging.Logger:
        """Send bankdemo logs to ``log_file`` so stdout only carries the transcript."""
        logger = logging.getLogger('bankdemo')
        logger.setLevel(self.log_level)
        # Drop handlers from an earlier call so reruns don't log twice.
        for old in logger.handlers[:]:
            logger.removeHandler(old)
            old.close()
        handler = logging.FileHandler(filename=self.log_file, encoding='utf-8', mode='w')
        handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
        logger.addHandler(handler)
        return logger
