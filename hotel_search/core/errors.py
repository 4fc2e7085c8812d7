"""Exceptions raised by the hotel search pipeline."""


class SearchError(RuntimeError):
    """Base class for every failure that aborts a search invocation."""


class ValidationError(SearchError):
    """Raised when a required input is missing or malformed."""


class ConfigurationError(SearchError):
    """Raised when no active source can be resolved."""


class RetrievalError(SearchError):
    """Raised when a source cannot be fetched or returns an unusable envelope."""


class FormattingError(SearchError):
    """Raised when the currency formatter reports a failure."""


REQUIRED_TEMPLATE = "{} is required"


def require(label: str, value) -> None:
    if value is None or value == "":
        raise ValidationError(REQUIRED_TEMPLATE.format(label))
