"""The two fields of an email address."""

from enum import Enum


class AddressPart(str, Enum):
    """Which side of the separator a value or rule belongs to."""

    LOCAL = "local"
    DOMAIN = "domain"
