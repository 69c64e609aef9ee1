"""structlog configuration for hosts embedding the pricing core."""

import logging

import structlog


def configure_logging(verbose: bool = False, json: bool = False) -> None:
    """Install structlog processors for pricing debug events.

    Args:
        verbose: If True, emit debug events (engine inputs and outputs)
        json: If True, render JSON lines instead of console output
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
