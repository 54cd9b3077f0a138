import logging
import sys


class Log:
    """Centralized parser logging; keyword context is rendered as key=value pairs."""

    _logger: logging.Logger = logging.getLogger("docparser")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(cls._format(message, context))

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(cls._format(message, context))

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._logger.debug(cls._format(message, context))

    @classmethod
    def error(cls, message: str, exc: BaseException | None = None, **context: object) -> None:
        """Log an error; pass *exc* to attach its traceback."""
        cls._logger.error(cls._format(message, context), exc_info=exc)

    @staticmethod
    def _format(message: str, context: dict[str, object]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
        return f"{message} [{pairs}]"
