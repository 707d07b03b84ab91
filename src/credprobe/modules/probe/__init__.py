"""Differential-response credential probing."""

from .discovery import describe_form, discover_login_form
from .errors import (
    BaselineError,
    FormDescriptorError,
    LoginFormNotFoundError,
    ProbeError,
    ProbeSetupError,
    ProbeTransportError,
    ProtocolMismatchError,
    RedirectLimitError,
)
from .form import FormDescriptor, FormInput, load_form_descriptor, save_form_descriptor
from .models import ProbeConfig
from .orchestrator import Prober
from .signature import Signature, is_candidate
from .submitters import (
    BasicAuthSubmitter,
    CredentialSubmitter,
    FormSubmitter,
    create_submitter,
    send_request,
)
from .wordlist import load_wordlist

__all__ = [
    "BaselineError",
    "BasicAuthSubmitter",
    "CredentialSubmitter",
    "FormDescriptor",
    "FormDescriptorError",
    "FormInput",
    "FormSubmitter",
    "LoginFormNotFoundError",
    "ProbeConfig",
    "ProbeError",
    "ProbeSetupError",
    "ProbeTransportError",
    "Prober",
    "ProtocolMismatchError",
    "RedirectLimitError",
    "Signature",
    "create_submitter",
    "describe_form",
    "discover_login_form",
    "is_candidate",
    "load_form_descriptor",
    "load_wordlist",
    "save_form_descriptor",
    "send_request",
]
