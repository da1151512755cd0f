"""Submission client for the external feedback and edit logs."""

from expo_stalls.submissions.client import SubmissionClient, SubmissionOutcome

__all__ = ["SubmissionClient", "SubmissionOutcome"]
