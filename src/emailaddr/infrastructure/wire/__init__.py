"""Binary wire format: string-record buffers and the email address codec."""

from emailaddr.infrastructure.wire.binary_codec import decode, encode, receive, send
from emailaddr.infrastructure.wire.message_buffer import MessageReader, MessageWriter

__all__ = [
    "MessageReader",
    "MessageWriter",
    "decode",
    "encode",
    "receive",
    "send",
]
