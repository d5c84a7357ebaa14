"""Player model."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from scrimmage.core.attributes import AttributeSet
from scrimmage.core.enums import Position


@dataclass
class Player:
    """
    A participant supplied by the roster system.

    The engine only reads ``attributes``; identity fields are carried
    through to play results for attribution.
    """

    id: UUID = field(default_factory=uuid4)
    first_name: str = ""
    last_name: str = ""
    position: Position = Position.WR
    attributes: AttributeSet = field(default_factory=AttributeSet)
    jersey_number: int = 0

    @property
    def full_name(self) -> str:
        """Full name of the player."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_name(self) -> str:
        """Short display name (e.g., 'T. Brady'), falls back to position."""
        if self.first_name and self.last_name:
            return f"{self.first_name[0]}. {self.last_name}"
        return self.last_name or self.first_name or self.position.value

    def get_attribute(self, name: str) -> float:
        """Get an attribute value by name."""
        return self.attributes.get(name)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "position": self.position.value,
            "attributes": self.attributes.to_dict(),
            "jersey_number": self.jersey_number,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        """Create from dictionary."""
        return cls(
            id=UUID(data["id"]) if data.get("id") else uuid4(),
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            position=Position(data.get("position", "WR")),
            attributes=AttributeSet.from_dict(data.get("attributes", {})),
            jersey_number=data.get("jersey_number", 0),
        )

    def __str__(self) -> str:
        return f"{self.display_name} ({self.position.value})"
