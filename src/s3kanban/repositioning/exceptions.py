"""Custom exceptions for the Repositioning Engine."""


class RepositioningError(Exception):
    """Base exception for Repositioning Engine errors."""


class CardNotFoundError(RepositioningError):
    """Card with given ID does not exist."""
