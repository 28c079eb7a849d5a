from typing import Dict, List

from pydantic import BaseModel, Field

Tags = Dict[str, int]


class Info(BaseModel):
    id: str = ""
    title: str = ""


class Card(BaseModel):
    id: str
    createDate: str = ""
    title: str = ""
    summary: str = ""
    tags: List[str] = Field(default_factory=list)


class PostInput(BaseModel):
    """Body accepted by the create and update routes."""

    title: str = ""
    summary: str = ""
    content: str = ""
    author: str = ""
    tags: List[str] = Field(default_factory=list)
    createDate: str = ""
    isDraft: bool = False
    layout: str = ""


class Post(PostInput):
    id: str = ""
    modifiedDate: str = ""
    previous: Info = Field(default_factory=Info)
    next: Info = Field(default_factory=Info)

    def info(self) -> Info:
        return Info(id=self.id, title=self.title)

    def tags_to_lower(self) -> None:
        self.tags = [tag.lower() for tag in self.tags]


class SaveResult(BaseModel):
    id: str
    ok: bool


class TokenRequest(BaseModel):
    secretKey: str


class TokenResponse(BaseModel):
    token: str


def to_card(post: Post) -> Card:
    return Card(
        id=post.id,
        createDate=post.createDate,
        title=post.title,
        summary=post.summary,
        tags=list(post.tags),
    )
