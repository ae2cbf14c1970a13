"""
Logging configuration for weblink-browse.

Simple setup that adapters and tools can import.
Extractors should NOT log (they're pure functions).
"""

import logging
import sys

# Create logger for the package
logger = logging.getLogger("weblink")


def configure_logging(level: str = "WARNING") -> None:
    """
    Configure logging for weblink-browse.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logger.setLevel(getattr(logging, level.upper()))

    # Only add handler if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)

        # stdout belongs to the listing output
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


# NOTE: Call configure_logging() explicitly in cli.py or test setup.
# We don't auto-configure to avoid side effects on import.


def log_api_call(method: str, url: str, **params: object) -> None:
    """Log an outgoing request with key parameters."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    suffix = f" ({param_str})" if param_str else ""
    logger.debug(f"HTTP: {method} {url}{suffix}")


def log_api_result(method: str, url: str, status: int, cookie_count: int) -> None:
    """Log a response summary."""
    logger.debug(f"HTTP: {method} {url} -> {status} [{cookie_count} cookies]")


def log_redirect(status: int, location: str, hop: int) -> None:
    """Log a followed redirect."""
    logger.debug(f"Redirect {hop} ({status}) -> {location}")
