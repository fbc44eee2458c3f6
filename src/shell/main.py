"""
MCS CLI Application.

Main entry point for the command line utility.
"""

import logging
import sys

from dotenv import load_dotenv

# Load .env file at startup
load_dotenv()

from loguru import logger  # noqa: E402

from config.settings import get_settings  # noqa: E402

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[module]: <14}</cyan> | <level>{message}</level>"


class InterceptHandler(logging.Handler):
    """Intercept standard logging and redirect to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding loguru level
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: str) -> None:
    """
    Configure loguru sinks and route stdlib logging into loguru.

    Args:
        level: Minimum level written to stderr
    """
    # Configure loguru format with default module
    logger.configure(extra={"module": "Shell"})
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def main() -> None:
    """Start the interactive shell."""
    from src.shell.repl import Shell

    settings = get_settings()
    setup_logging(settings.log_level)

    shell = Shell()
    shell.install_interrupt_handler()
    shell.run()


if __name__ == "__main__":
    main()
