"""Fixed password lists shared by every run."""

from __future__ import annotations

COMMON_PASSWORDS: tuple[str, ...] = (
    "12345678",
    "123456789",
    "qwertyuiop",
    "qwertyui",
    "asdfghjk",
    "password",
    "password123456",
    "password123456789",
    "password987654321",
    "password1234",
    "password123!",
    "1qa2ws3ed4rf",
    "1q2w3e4r5t6y",
)

KEYBOARD_WALKS: tuple[str, ...] = (
    # qwerty
    "1qa2ws3ed4rf",
    "1q2w3e4r5t6y",
    # azerty
    "1aq2sz3de4rf",
    "1a2z3e4r5t6y",
)
