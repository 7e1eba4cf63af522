import json
import logging
import sys


class Log:
    """Centralized logging for the redaction run."""

    _logger: logging.Logger = logging.getLogger("redactor")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)

    @classmethod
    def payload(cls, message: str, payload: object) -> None:
        """Log a server diagnostic body as indented JSON at error level."""
        cls._logger.error(
            "%s\n%s", message, json.dumps(payload, indent=2, default=str)
        )
