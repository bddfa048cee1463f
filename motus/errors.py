"""Exceptions raised by motus at runtime."""


class MotusError(Exception):
    """Base class for recoverable failures."""


class AnalysisError(MotusError):
    """The entropy estimator could not analyze a password."""


class ClipboardError(MotusError):
    """The generated password could not be placed on the clipboard."""
