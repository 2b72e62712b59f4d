"""
Error Types Module
Exceptions raised by the ethnicity estimation engine.
"""


class EthnicityError(Exception):
    """Base class for all errors raised by match_ethnicity."""


class IngestionError(EthnicityError):
    """Source data is unreadable or malformed."""


class ConsistencyError(EthnicityError):
    """A joined row is missing its expected counterpart."""


class DivisionUndefined(EthnicityError):
    """No bins were resolved, so percentages cannot be computed."""
