"""
pushdispatch error types.

None of these ever reach a `submit()` caller; lanes catch and log them.
"""

from typing import Any, Optional


class PushDispatchError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class FetchError(PushDispatchError):
    def __init__(self, message: str, code: str = "fetch_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class RegistrationError(PushDispatchError):
    def __init__(self, message: str, code: str = "registration_error"):
        super().__init__(code, message)


class ConfigError(PushDispatchError):
    def __init__(self, message: str):
        super().__init__("config_error", message)
