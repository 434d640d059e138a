"""Commit models consumed when formatting web links."""

from datetime import datetime

from pydantic import BaseModel, Field


class CommitFile(BaseModel):
    """A file touched by a commit."""

    revision: str
    name: str

    class Config:
        frozen = True


class Commit(BaseModel):
    """A commit with its ordered list of changed files."""

    author: str | None = None
    comment: str = ""
    date: datetime | None = None
    files: list[CommitFile] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def first_revision(self) -> str | None:
        if not self.files:
            return None
        return self.files[0].revision
