"""Exceptions raised while building the API model."""


class ApiModelError(Exception):
    """Base class for all API model build failures."""


class IngestError(ApiModelError):
    """An index or compound file could not be read or parsed."""


class IdentifierError(ApiModelError):
    """A computed output identifier is unusable (e.g. contains whitespace)."""
