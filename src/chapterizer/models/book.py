"""Data models for document structure and chapters."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class PageIndexDestination(BaseModel):
    """Destination already known as a 0-based page index."""

    kind: Literal["page_index"] = "page_index"
    page_index: int = Field(ge=0)


class NamedDestination(BaseModel):
    """Destination referenced by name; needs a lookup through the document."""

    kind: Literal["named"] = "named"
    name: str


class ExplicitDestination(BaseModel):
    """Destination holding an opaque backend reference (e.g. a pypdf Destination)."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["explicit"] = "explicit"
    ref: Any


Destination = Annotated[
    Union[PageIndexDestination, NamedDestination, ExplicitDestination],
    Field(discriminator="kind"),
]


class OutlineNode(BaseModel):
    """Single entry in a document outline (bookmark tree)."""

    title: str = ""
    destination: Destination | None = None
    children: list["OutlineNode"] = Field(default_factory=list)


class ChapterInfo(BaseModel):
    """Outline entry anchored to a page, before content extraction."""

    title: str
    page_index: int  # 0-based anchor


class Chapter(BaseModel):
    """Chapter content and page range."""

    id: str
    title: str
    content: str
    start_page: int  # 1-based, inclusive
    end_page: int  # 1-based, inclusive
    page_index: int | None = None  # outline anchor, outline-derived chapters only

    @property
    def word_count(self) -> int:
        return len(self.content.split())

    @property
    def character_count(self) -> int:
        return len(self.content)
