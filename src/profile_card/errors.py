"""Error taxonomy for profile-card.

Every error a caller can see derives from ``ProfileCardError`` and carries a
human-readable message plus a ``status_code`` hint for whatever transport
layer serves the card.
"""

from __future__ import annotations


class ProfileCardError(Exception):
    default_message = "Profile card error"
    status_code = 500

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


class MissingCredentials(ProfileCardError):
    default_message = "GITHUB_TOKEN is missing. Set it in your environment."
    status_code = 500


class SubjectNotFound(ProfileCardError):
    default_message = "User not found"
    status_code = 404


class UpstreamAuthFailed(ProfileCardError):
    default_message = "GitHub API authentication failed (401)"
    status_code = 502


class UpstreamRateLimited(ProfileCardError):
    default_message = "GitHub API rate limit exceeded or access forbidden (403)"
    status_code = 503


class UpstreamError(ProfileCardError):
    default_message = "GitHub API error"
    status_code = 502


class TooManyInFlight(ProfileCardError):
    default_message = "Too many concurrent requests. Please try again later."
    status_code = 503


class InvalidSnapshotInput(ProfileCardError):
    default_message = "Invalid snapshot data"
    status_code = 400


class SharedCacheError(Exception):
    """Raised by the shared cache layer; never surfaced to callers."""
