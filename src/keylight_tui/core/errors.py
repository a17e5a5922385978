"""Exception hierarchy for keylight-tui.

Every failure talking to the light is fatal, so these exist to carry a clean
message to the entry point rather than to drive recovery.

```
KeyLightError (base)
├── ConfigurationError
├── DeviceConnectionError
├── ProtocolError
├── DecodeError
└── EmptyDeviceListError
```

- `user_message`: short message printed to the terminal
- `technical_message`: detailed message for the log file
- `recovery_hint`: optional suggestion shown under the message
"""

from __future__ import annotations

from typing import Optional

DEVICE_HINT = "Check that the Key Light is powered on and reachable on the network."


class KeyLightError(Exception):
    """Base exception for all keylight-tui errors."""

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """Message with the recovery hint appended, if any."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg


class ConfigurationError(KeyLightError):
    """An environment setting has an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(
            user_message=f"Invalid value for {name}: {value!r} ({reason})",
            recovery_hint=f"Fix or unset the {name} environment variable.",
        )
        self.name = name
        self.value = value


class DeviceConnectionError(KeyLightError):
    """The light could not be reached or did not answer in time."""

    def __init__(self, address: str, original_error: Optional[str] = None) -> None:
        technical = f"Could not contact key light at {address}"
        if original_error:
            technical += f": {original_error}"
        super().__init__(
            user_message=f"Could not contact key light at {address}, is it on?",
            technical_message=technical,
            recovery_hint=DEVICE_HINT,
        )
        self.address = address


class ProtocolError(KeyLightError):
    """The light answered with a non-success HTTP status."""

    def __init__(self, status: int, method: str = "GET", url: str = "") -> None:
        super().__init__(
            user_message=f"Key light returned HTTP {status} for {method} request",
            technical_message=f"{method} {url} returned HTTP {status}",
            recovery_hint=DEVICE_HINT,
        )
        self.status = status
        self.method = method


class DecodeError(KeyLightError):
    """The response body is not a valid lights document."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            user_message="Could not parse the key light response",
            technical_message=f"Could not parse the key light response: {detail}",
        )
        self.detail = detail


class EmptyDeviceListError(KeyLightError):
    """The light reported zero lights."""

    def __init__(self) -> None:
        super().__init__(
            user_message="Expected to find at least one light!",
            technical_message="Lights document has an empty 'lights' array",
            recovery_hint=DEVICE_HINT,
        )
