"""Password candidate generation."""

from .generator import PasswordOptions, generate, org_word
from .transforms import capitalize

__all__ = ["PasswordOptions", "capitalize", "generate", "org_word"]
