"""Short identifier value object."""
import base64
import re
import secrets
from dataclasses import dataclass

_SHORT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,14}$")


@dataclass(frozen=True)
class ShortID:
    """
    Short, URL-safe identifier for orders, items and junction rows.

    Generated values are 12 characters: 72 random bits, base64url
    encoded. Stored values fit the 14 character key columns.
    """
    value: str

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValueError(f"Invalid short id: {self.value!r}")

    @classmethod
    def generate(cls) -> "ShortID":
        """Generate a new ShortID."""
        raw = secrets.token_bytes(9)
        return cls(value=base64.urlsafe_b64encode(raw).decode("ascii"))

    @staticmethod
    def is_valid(value: str) -> bool:
        return isinstance(value, str) and bool(_SHORT_ID_PATTERN.match(value))

    def __str__(self) -> str:
        return self.value


def new_short_id() -> str:
    """Default identifier factory used by the repository."""
    return ShortID.generate().value
