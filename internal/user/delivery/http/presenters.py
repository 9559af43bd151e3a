"""Request bodies for the auth routes."""

from typing import Optional

from pydantic import BaseModel, Field

from ...type import LoginInput, SignupInput, UpdateStatusInput


class SignupRequest(BaseModel):
    email: str = Field(default="", description="Account e-mail")
    name: str = Field(default="", description="Display name")
    password: str = Field(default="", description="Plain-text password")

    def to_input(self) -> SignupInput:
        return SignupInput(email=self.email, name=self.name, password=self.password)


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""

    def to_input(self) -> LoginInput:
        return LoginInput(email=self.email, password=self.password)


class UpdateStatusRequest(BaseModel):
    status: Optional[str] = None

    def to_input(self) -> UpdateStatusInput:
        return UpdateStatusInput(status=self.status or "")


__all__ = ["SignupRequest", "LoginRequest", "UpdateStatusRequest"]
