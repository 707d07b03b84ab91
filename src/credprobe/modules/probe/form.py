"""Form descriptor model and its JSON representation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import FormDescriptorError

FORM_ENCODED = "application/x-www-form-urlencoded"
JSON_ENCODED = "application/json"
CONTENT_TYPES = (FORM_ENCODED, JSON_ENCODED)


@dataclass(slots=True)
class FormInput:
    """A static name/value pair sent with every submission."""

    name: str
    value: str


@dataclass
class FormDescriptor:
    """Everything needed to submit a login form.

    ``token_value`` is refreshed by the form submitter before every attempt;
    all other fields are read-only once a run has started.
    """

    url: str
    action_path: str = ""
    username_field: str = ""
    password_field: str = ""
    referer: str = ""
    content_type: str = FORM_ENCODED
    token_name: str = ""
    token_value: str = ""
    extra_inputs: list[FormInput] = field(default_factory=list)

    @property
    def is_json(self) -> bool:
        return self.content_type == JSON_ENCODED

    def validate(self) -> None:
        """Raise FormDescriptorError when the descriptor cannot be submitted."""
        missing = [
            label
            for label, value in (
                ("URL", self.url),
                ("username field", self.username_field),
                ("password field", self.password_field),
            )
            if not value
        ]
        if missing:
            raise FormDescriptorError(f"Form descriptor is missing: {', '.join(missing)}")
        if self.content_type not in CONTENT_TYPES:
            raise FormDescriptorError(
                f"Unsupported content type {self.content_type!r}; "
                f"expected one of {', '.join(CONTENT_TYPES)}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "URL": self.url,
            "Referer": self.referer,
            "ActionPath": self.action_path,
            "ContentType": self.content_type,
            "Username": self.username_field,
            "Password": self.password_field,
            "TokenName": self.token_name,
            "TokenVal": self.token_value,
            "ExtraInputs": [{"Name": i.name, "Value": i.value} for i in self.extra_inputs],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FormDescriptor:
        if not isinstance(data, dict):
            raise FormDescriptorError("Form descriptor must be a JSON object")
        try:
            extras = [
                FormInput(name=str(item["Name"]), value=str(item.get("Value") or ""))
                for item in data.get("ExtraInputs") or []
            ]
        except (KeyError, TypeError, AttributeError) as exc:
            raise FormDescriptorError(f"Malformed ExtraInputs entry: {exc}") from exc

        return cls(
            url=str(data.get("URL") or ""),
            referer=str(data.get("Referer") or ""),
            action_path=str(data.get("ActionPath") or ""),
            content_type=str(data.get("ContentType") or FORM_ENCODED),
            username_field=str(data.get("Username") or ""),
            password_field=str(data.get("Password") or ""),
            token_name=str(data.get("TokenName") or ""),
            token_value=str(data.get("TokenVal") or ""),
            extra_inputs=extras,
        )


def load_form_descriptor(path: Path) -> FormDescriptor:
    """Load and validate a form descriptor from a JSON file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise FormDescriptorError(f"Cannot read form file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise FormDescriptorError(f"Form file {path} is not valid JSON: {exc}") from exc

    descriptor = FormDescriptor.from_dict(data)
    descriptor.validate()
    return descriptor


def save_form_descriptor(descriptor: FormDescriptor, path: Path) -> Path:
    """Write a form descriptor as indented JSON."""
    path = Path(path)
    path.write_text(json.dumps(descriptor.to_dict(), indent=1) + "\n", encoding="utf-8")
    return path
