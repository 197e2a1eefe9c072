"""Container module - centralized wiring for host-facing objects.

Adapter selection happens here (composition root); the rest of the package
receives its collaborators through constructor arguments.

Usage:
    from emailaddr.core.container import get_email_type_handler

    handler = get_email_type_handler()
    result = handler.input("alice@example.com")
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from emailaddr.core.config import get_settings

if TYPE_CHECKING:
    from emailaddr.application.handlers import EmailTypeHandler
    from emailaddr.domain.protocols import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from emailaddr.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.environment.uses_json_logs,
        level=settings.log_level,
    )


@lru_cache
def get_email_type_handler() -> "EmailTypeHandler":
    """Return the host binding configured from settings.

    Returns:
        EmailTypeHandler using the configured grammar level and field bound.
    """
    from emailaddr.application.handlers import EmailTypeHandler

    settings = get_settings()
    return EmailTypeHandler(
        get_logger(),
        grammar=settings.grammar,
        max_length=settings.max_field_length,
    )
