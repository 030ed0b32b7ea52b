"""Exceptions raised by the page acquirer."""

from __future__ import annotations


class AcquisitionError(Exception):
    """The page HTML could not be obtained.

    Covers network failures, non-success HTTP statuses, browser launch
    failures and navigation timeouts.  The message carries the root cause
    (e.g. the numeric status) and is surfaced to callers verbatim.
    """


FetchError = AcquisitionError
