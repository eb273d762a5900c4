"""Client domain model."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Client:
    """A registered trader. The id is assigned on registration."""

    first_name: str
    last_name: str
    email: Optional[str] = None
    client_id: Optional[int] = field(default=None)

    @classmethod
    def named(cls, first_name: str, last_name: str, email: Optional[str] = None) -> "Client":
        return cls(first_name=first_name, last_name=last_name, email=email)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
