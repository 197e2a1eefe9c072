"""Host-facing handlers."""

from emailaddr.application.handlers.email_type_handler import EmailTypeHandler

__all__ = ["EmailTypeHandler"]
