"""Runtime errors."""


class RuntimeStartError(Exception):
    """The hosted runtime could not begin normal operation."""


class UnknownBackendError(RuntimeStartError, ValueError):
    """The configured runtime backend does not exist."""
