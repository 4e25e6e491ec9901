from __future__ import annotations


class ProfileSerializationError(ValueError):
    """The candidate profile cannot be serialized for an outbound request."""

    def __init__(self, message: str, *, code: str = "profile_invalid"):
        super().__init__(message)
        self.code = code
