"""Error taxonomy for configuration admission.

Every rejection raised by an admission rule is a :class:`ConfError`.
The ``code`` attribute is stable and is what the service layer reports
in ``ServiceError.code``.
"""

from __future__ import annotations


class ConfError(Exception):
    """Base class for all configuration admission failures."""

    code = "CONF_ERROR"


class CapacityExceededError(ConfError):
    """A directive with a cardinality limit is already full."""

    code = "CAPACITY_EXCEEDED"


class DuplicateEntryError(ConfError):
    """An equal item is already present in the configuration."""

    code = "DUPLICATE_ENTRY"


class InvalidValueError(ConfError):
    """An option carries a value outside its legal range."""

    code = "INVALID_VALUE"


class UnknownOptionError(ConfError):
    """An option tag is not part of the recognized vocabulary."""

    code = "UNKNOWN_OPTION"
