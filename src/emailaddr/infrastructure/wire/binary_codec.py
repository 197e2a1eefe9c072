"""Binary wire codec for email addresses.

Wire layout (bit-exact, no header):

    <local ASCII bytes> 0x00 <domain ASCII bytes> 0x00

Decoding bypasses the scanner and format rules because the wire form is
produced from an already valid value. It still rejects bytes that could not
have come from ``encode`` (empty fields, '@', characters outside the
accepted alphabet) and applies the same capacity bound as parsing.

Usage:
    from emailaddr.infrastructure.wire import decode, encode

    payload = encode(address)          # b"Alice\\x00Example.com\\x00"
    result = decode(payload)           # Success(EmailAddress(...))
"""

from emailaddr.core.constants import MAX_FIELD_LENGTH, SEPARATOR, WIRE_ENCODING
from emailaddr.core.result import Failure, Result, Success
from emailaddr.domain.enums import AddressPart
from emailaddr.domain.errors import DecodeError, EmailAddressError, EmailAddressMessages
from emailaddr.domain.protocols import MessageReaderProtocol, MessageWriterProtocol
from emailaddr.domain.validators.character_class import is_valid_character
from emailaddr.domain.value_objects import EmailAddress, construct
from emailaddr.infrastructure.wire.message_buffer import MessageReader, MessageWriter


def send(value: EmailAddress, writer: MessageWriterProtocol) -> None:
    """Write ``value`` to a host message as two string records.

    Args:
        value: Address to serialize; fields are written as stored.
        writer: Destination buffer.
    """
    writer.send_string(value.local.encode(WIRE_ENCODING))
    writer.send_string(value.domain.encode(WIRE_ENCODING))


def receive(
    reader: MessageReaderProtocol, *, max_length: int = MAX_FIELD_LENGTH
) -> Result[EmailAddress, EmailAddressError]:
    """Read one address (two string records) from a host message.

    Args:
        reader: Source buffer, positioned at the local record.
        max_length: Per-field bound in characters.

    Returns:
        Success(EmailAddress), Failure(DecodeError) for malformed records, or
        Failure(CapacityExceededError) for an oversized field.
    """
    fields: list[str] = []
    for part in (AddressPart.LOCAL, AddressPart.DOMAIN):
        record = reader.get_string()
        if isinstance(record, Failure):
            return record

        field = _decode_field(part, record.value)
        if isinstance(field, Failure):
            return field
        fields.append(field.value)

    local, domain = fields
    return construct(local, domain, max_length=max_length)


def encode(value: EmailAddress) -> bytes:
    """Serialize ``value`` to its wire payload."""
    writer = MessageWriter()
    send(value, writer)
    return writer.getvalue()


def decode(
    data: bytes, *, max_length: int = MAX_FIELD_LENGTH
) -> Result[EmailAddress, EmailAddressError]:
    """Deserialize a complete wire payload.

    Args:
        data: Payload holding exactly two string records.
        max_length: Per-field bound in characters.

    Returns:
        Same outcomes as ``receive``, plus Failure(DecodeError) when bytes
        remain after the domain record.
    """
    reader = MessageReader(data)
    result = receive(reader, max_length=max_length)
    if isinstance(result, Success):
        consumed = reader.ensure_consumed()
        if isinstance(consumed, Failure):
            return consumed
    return result


def _decode_field(part: AddressPart, record: bytes) -> Result[str, DecodeError]:
    try:
        text = record.decode(WIRE_ENCODING)
    except UnicodeDecodeError:
        return Failure(
            error=DecodeError.because(
                EmailAddressMessages.DECODE_NOT_ASCII.format(part=part.value)
            )
        )

    if not text:
        return Failure(
            error=DecodeError.because(
                EmailAddressMessages.DECODE_EMPTY_FIELD.format(part=part.value)
            )
        )
    if SEPARATOR in text:
        return Failure(
            error=DecodeError.because(
                EmailAddressMessages.DECODE_SEPARATOR_IN_FIELD.format(part=part.value)
            )
        )
    if not all(is_valid_character(char) for char in text):
        return Failure(
            error=DecodeError.because(
                EmailAddressMessages.DECODE_INVALID_CHARACTER.format(part=part.value)
            )
        )
    return Success(value=text)
