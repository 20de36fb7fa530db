"""
Logging configuration
"""
import logging
import sys


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the root logger to write to stdout."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Access lines duplicate what we already log per request failure
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger("buildmate")
