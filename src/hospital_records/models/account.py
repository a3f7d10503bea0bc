"""User account data model.

Accounts are recorded for administration only; no operation is gated on them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Role(Enum):
    """Role of a user account."""
    
    ADMIN = "ADMIN"
    PHYSICIAN = "PHYSICIAN"
    NURSE = "NURSE"
    RECEPTIONIST = "RECEPTIONIST"
    
    @property
    def label(self) -> str:
        return self.value.capitalize()
    
    @classmethod
    def from_choice(cls, choice: int) -> "Role":
        """Map a 1-based menu choice to a role.
        
        1 admin, 2 physician, 3 nurse; any other choice selects receptionist.
        """
        options = list(cls)
        if 1 <= choice <= len(options):
            return options[choice - 1]
        return cls.RECEPTIONIST


@dataclass
class UserAccount:
    """User account.
    
    Attributes:
        id: Identifier, unique within accounts
        username: Login name (uniqueness not enforced)
        password_hash: One-way hash of the password, never the plaintext
        role: Account role
        last_login: Timestamp text of the last login, None if never
    """
    
    id: int
    username: str
    password_hash: str
    role: Role
    last_login: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "password_hash": self.password_hash,
            "role": self.role.value,
            "last_login": self.last_login,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserAccount":
        return cls(
            id=data["id"],
            username=data["username"],
            password_hash=data["password_hash"],
            role=Role(data["role"]),
            last_login=data.get("last_login"),
        )
