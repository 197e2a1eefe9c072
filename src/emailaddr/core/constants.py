"""Email address type constants.

The field bound comes from the storage layout the type was designed for:
128 bytes per field including the C string terminator.
"""

SEPARATOR = "@"

# Bytes reserved per field, terminator included
FIELD_STORAGE_BYTES = 128

# Longest local or domain part, in characters
MAX_FIELD_LENGTH = FIELD_STORAGE_BYTES - 1

# Wire records are C strings
RECORD_TERMINATOR = b"\x00"

WIRE_ENCODING = "ascii"
