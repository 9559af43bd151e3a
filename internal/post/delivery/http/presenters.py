"""Request bodies for the feed routes."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...type import CreatePostInput, UpdatePostInput


class CreatePostRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    content: str = ""
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    def to_input(self) -> CreatePostInput:
        return CreatePostInput(title=self.title, content=self.content, image_url=self.image_url)


class UpdatePostRequest(BaseModel):
    """imageUrl omitted or null keeps the stored image."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    content: str = ""
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    def to_input(self) -> UpdatePostInput:
        return UpdatePostInput(title=self.title, content=self.content, image_url=self.image_url)


__all__ = ["CreatePostRequest", "UpdatePostRequest"]
