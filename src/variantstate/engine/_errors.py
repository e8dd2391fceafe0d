"""Exceptions raised by the variant engine."""


class VariantError(Exception):
    """Base class for variant engine errors."""


class InvalidTransition(VariantError):
    """A transition was requested for a value or event outside the declared families."""


class NonExhaustiveDispatch(VariantError):
    """A dispatch table does not cover every variant of its family."""


class UnknownRawValue(VariantError):
    """A raw value has no variant in its mapping table."""
