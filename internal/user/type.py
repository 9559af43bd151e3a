"""Types for the user domain."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class SignupInput:
    email: str
    name: str
    password: str


@dataclass
class LoginInput:
    email: str
    password: str


@dataclass
class LoginOutput:
    token: str
    user_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, "userId": self.user_id}


@dataclass
class UpdateStatusInput:
    status: str


@dataclass
class ReconcileOutput:
    """Result of rebuilding owned sets from the posts table.

    Attributes:
        users: Number of users whose owned set was rebuilt
        entries: Owned-set entries written in total
        diverged: Ids of users whose owned set did not match their posts
    """

    users: int = 0
    entries: int = 0
    diverged: List[str] = field(default_factory=list)


__all__ = ["SignupInput", "LoginInput", "LoginOutput", "UpdateStatusInput", "ReconcileOutput"]
