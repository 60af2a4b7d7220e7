"""Custom exception hierarchy for the resume match scoring engine.

The scoring core itself never raises; these cover the caller-side
boundary where raw analyzer payloads are loaded and validated.
"""

from __future__ import annotations


class ResumeMatchError(Exception):
    """Base exception for all resume-match errors."""


class AnalysisPayloadError(ResumeMatchError):
    """Raised when a raw analyzer payload is not a well-formed JSON object."""


class PayloadFileError(ResumeMatchError):
    """Raised when a payload file cannot be read or decoded."""
