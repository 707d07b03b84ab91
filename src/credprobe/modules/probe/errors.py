"""Exceptions raised while setting up or running a credential probe."""

from __future__ import annotations


class ProbeError(Exception):
    """Base class for every probe failure."""


class ProbeSetupError(ProbeError):
    """Raised before any attempt when the probe cannot be configured."""


class FormDescriptorError(ProbeSetupError):
    """Raised when a form descriptor is incomplete or malformed."""


class LoginFormNotFoundError(ProbeSetupError):
    """Raised when no usable login form is found on a page."""


class ProbeTransportError(ProbeError):
    """Raised when an attempt fails at the HTTP transport level."""


class RedirectLimitError(ProbeTransportError):
    """Raised when an attempt follows more redirects than allowed."""


class ProtocolMismatchError(ProbeError):
    """Raised when a Basic-auth probe targets an endpoint that is not Basic auth."""

    def __init__(self, url: str, header_value: str) -> None:
        self.url = url
        self.header_value = header_value
        super().__init__(
            f"Not basic authentication as {url} does not respond as basic auth "
            f"(header WWW-Authenticate={header_value!r})"
        )


class BaselineError(ProbeError):
    """Raised when the invalid-credential baseline cannot be established."""
