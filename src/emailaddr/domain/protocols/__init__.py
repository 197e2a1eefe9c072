"""Domain protocols (ports) implemented by infrastructure adapters."""

from emailaddr.domain.protocols.logger_protocol import LoggerProtocol
from emailaddr.domain.protocols.message_buffer_protocol import (
    MessageReaderProtocol,
    MessageWriterProtocol,
)

__all__ = [
    "LoggerProtocol",
    "MessageReaderProtocol",
    "MessageWriterProtocol",
]
