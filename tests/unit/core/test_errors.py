"""Tests for the error hierarchy and the re-check classifier."""

import pytest

from domwait.core.errors import (
    REMOVAL_TIMEOUT_MESSAGE,
    REMOVAL_VALIDATION_MESSAGE,
    DomWaitError,
    ElementLookupError,
    ElementNotFoundError,
    MultipleElementsFoundError,
    RecheckVerdict,
    WaitTimeoutError,
    WaitValidationError,
    classify_recheck_error,
    is_not_found_signal,
)


class TestClassifier:
    def test_not_found_means_removed(self):
        assert classify_recheck_error(ElementNotFoundError("gone")) is RecheckVerdict.REMOVED

    def test_multiple_found_passes_through(self):
        error = MultipleElementsFoundError("too many")
        assert classify_recheck_error(error) is RecheckVerdict.PASSTHROUGH

    @pytest.mark.parametrize(
        "error",
        [RuntimeError("app"), LookupError("builtin"), KeyError("k"), ElementLookupError("base")],
    )
    def test_other_errors_pass_through(self, error):
        assert classify_recheck_error(error) is RecheckVerdict.PASSTHROUGH

    def test_not_found_subclasses_are_recognised(self):
        class StaleReferenceError(ElementNotFoundError):
            pass

        assert is_not_found_signal(StaleReferenceError("stale"))


class TestHierarchy:
    def test_validation_error_default_message(self):
        error = WaitValidationError()
        assert str(error) == REMOVAL_VALIDATION_MESSAGE
        assert isinstance(error, ValueError)
        assert isinstance(error, DomWaitError)

    def test_timeout_error_default_message(self):
        error = WaitTimeoutError()
        assert str(error) == REMOVAL_TIMEOUT_MESSAGE
        assert isinstance(error, TimeoutError)

    def test_lookup_errors_are_lookup_errors(self):
        assert isinstance(ElementNotFoundError("x"), LookupError)
        assert isinstance(MultipleElementsFoundError("x"), ElementLookupError)
