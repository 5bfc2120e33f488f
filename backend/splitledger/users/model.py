"""Participant and category records owned by the surrounding app."""
from dataclasses import dataclass
from typing import Any, Dict

from splitledger.utils.errors import InvalidRecord


@dataclass(frozen=True)
class Participant:
    id: str
    name: str = ""
    email: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.id

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            email=data.get("email") or "",
        )


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    color: str = ""

    def validate(self) -> "Category":
        if not self.name.strip():
            raise InvalidRecord(f"Category {self.id}: name must not be empty")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "color": self.color}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            color=data.get("color") or "",
        )
