"""Exception hierarchy and the re-check error classifier.

The removal wait surfaces every failure through the future it returns; it
never logs them.  Lookup errors are raised by the query helpers in
:mod:`domwait.dom.queries` (or any other lookup that reuses these classes).
"""

from __future__ import annotations

from enum import Enum

REMOVAL_VALIDATION_MESSAGE = (
    "The element(s) given to waitForElementToBeRemoved are already removed. "
    "waitForElementToBeRemoved requires that the element(s) exist(s) before "
    "waiting for removal."
)
REMOVAL_TIMEOUT_MESSAGE = "Timed out in waitForElementToBeRemoved."
WAIT_FOR_TIMEOUT_MESSAGE = "Timed out in wait_for."


class DomWaitError(Exception):
    """Base class for every error raised by this package."""


class WaitValidationError(DomWaitError, ValueError):
    """The wait target was absent or empty before waiting began."""

    def __init__(self, message: str = REMOVAL_VALIDATION_MESSAGE) -> None:
        super().__init__(message)


class WaitTimeoutError(DomWaitError, TimeoutError):
    """The deadline elapsed before the awaited condition held."""

    def __init__(self, message: str = REMOVAL_TIMEOUT_MESSAGE) -> None:
        super().__init__(message)


class ElementLookupError(DomWaitError, LookupError):
    """Base for errors raised by element lookup helpers."""


class ElementNotFoundError(ElementLookupError):
    """A lookup matched no elements."""


class MultipleElementsFoundError(ElementLookupError):
    """A single-element lookup matched more than one element."""


class RecheckVerdict(str, Enum):
    """What a re-check exception means for a pending removal wait."""

    REMOVED = "removed"
    PASSTHROUGH = "passthrough"


def is_not_found_signal(error: BaseException) -> bool:
    """Return ``True`` if *error* is a lookup's "no matching element" error."""
    return isinstance(error, ElementNotFoundError)


def classify_recheck_error(error: BaseException) -> RecheckVerdict:
    """Triage an exception raised while re-checking a removal.

    A not-found error from the lookup is taken as proof of removal, even
    when it came from a lookup unrelated to the watched element.  Anything
    else, including "found multiple", is handed back to the caller as-is.
    """
    if is_not_found_signal(error):
        return RecheckVerdict.REMOVED
    return RecheckVerdict.PASSTHROUGH
