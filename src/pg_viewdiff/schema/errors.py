"""Errors raised by the schema model."""


class InvariantViolationError(Exception):
    """A schema object was used in a way its invariants forbid.

    Signals a bug in the calling diff logic rather than bad input data.
    """
