"""Build target dispatch.

A build is either a desktop build or a mobile build. The target is fixed by
build metadata (``config.BUILD_TARGET``) when the package is imported, so only
one entry path exists per artifact:

- desktop: ``futurebuddy_desktop.__main__:main`` (console script)
- mobile: the function decorated with :func:`mobile_entry_point`, invoked by
  the platform host through :func:`invoke_mobile_entry`
"""

from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from . import config
from .telemetry import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[[], None])

_mobile_entry: Callable[[], None] | None = None


class BuildTarget(str, Enum):
    DESKTOP = "desktop"
    MOBILE = "mobile"


def current_target() -> BuildTarget:
    """Return the build target this artifact was built for.

    Raises:
        ValueError: If the configured target is unknown
    """
    try:
        return BuildTarget(config.BUILD_TARGET.strip().lower())
    except ValueError:
        raise ValueError(f"Unknown build target: {config.BUILD_TARGET}") from None


def mobile_entry_point(
    func: F | None = None, *, target: BuildTarget | None = None
) -> F | Callable[[F], F]:
    """Mark ``func`` as the mobile entry callback.

    On a mobile target the function is registered for the platform host; on
    a desktop target it is returned untouched and nothing is registered.

    Args:
        func: Entry function (zero arguments)
        target: Build target override, defaults to :func:`current_target`
    """

    def decorate(fn: F) -> F:
        global _mobile_entry

        resolved = target or current_target()
        if resolved is BuildTarget.MOBILE:
            if _mobile_entry is not None and _mobile_entry is not fn:
                raise RuntimeError(
                    "Mobile entry point already registered: "
                    f"{getattr(_mobile_entry, '__qualname__', repr(_mobile_entry))}"
                )
            _mobile_entry = fn
            name = getattr(fn, "__qualname__", repr(fn))
            logger.debug(f"[Target] Registered mobile entry point {name}")
        return fn

    if func is None:
        return decorate
    return decorate(func)


def get_mobile_entry() -> Callable[[], None] | None:
    """Return the registered mobile entry callback, or None on desktop builds."""
    return _mobile_entry


def invoke_mobile_entry() -> None:
    """Called by the mobile platform host to start the application.

    Raises:
        LookupError: If this artifact has no mobile entry (desktop build)
    """
    entry = _mobile_entry
    if entry is None:
        raise LookupError("No mobile entry point registered for this build")
    entry()


def _reset_for_testing() -> None:
    """Clear the registered mobile entry (tests only)."""
    global _mobile_entry
    _mobile_entry = None
