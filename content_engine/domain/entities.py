from datetime import UTC, datetime
from enum import Enum
from typing import Any, Literal
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex}"


# --- Errors ---

class ContentEngineError(Exception):
    """Base class for content engine errors."""


class UnknownBlockKindError(ContentEngineError, LookupError):
    """Raised when a block kind is not part of the registry."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"Unknown block kind: {kind!r}")


# --- Enums / Literals ---

class BlockKind(str, Enum):
    TEXT = "text"
    HEADING = "heading"
    IMAGE = "image"
    VIDEO = "video"
    GALLERY = "gallery"
    QUOTE = "quote"
    CODE = "code"
    EMBED = "embed"
    FORM = "form"
    BUTTON = "button"
    SPACER = "spacer"
    DIVIDER = "divider"


PageStatus = Literal["draft", "published", "archived"]


def parse_block_kind(value: Any) -> BlockKind:
    """
    Coerce a kind given as enum member or string value.

    Raises:
        UnknownBlockKindError: If the value names no registered kind.
    """
    if isinstance(value, BlockKind):
        return value
    if isinstance(value, str):
        try:
            return BlockKind(value)
        except ValueError:
            raise UnknownBlockKindError(value) from None
    raise UnknownBlockKindError(value)


# --- Blocks ---

class ContentBlock(BaseModel):
    id: str = Field(default_factory=lambda: _new_id("block"), frozen=True)
    kind: BlockKind = Field(validation_alias=AliasChoices("kind", "type"), frozen=True)
    content: dict[str, Any] = Field(default_factory=dict)
    order: int = 0
    style: dict[str, Any] = Field(
        default_factory=dict, validation_alias=AliasChoices("style", "styles")
    )
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("kind", mode="before")
    @classmethod
    def _registered_kind(cls, value: Any) -> BlockKind:
        # UnknownBlockKindError is not a ValueError, so pydantic lets it propagate
        return parse_block_kind(value)


# --- Media ---

class MediaAsset(BaseModel):
    id: str = Field(default_factory=lambda: _new_id("media"))
    filename: str
    original_name: str
    mime_type: str
    size: int
    url: str
    alt: str | None = None
    caption: str | None = None
    tags: list[str] = Field(default_factory=list)
    tenant_id: str
    uploaded_by: str
    created_at: datetime = Field(default_factory=_utcnow)


# --- Pages & Templates ---

class SeoMeta(BaseModel):
    title: str | None = None
    description: str | None = None
    keywords: list[str] = Field(default_factory=list)
    image: str | None = None


class ContentPage(BaseModel):
    id: str = Field(default_factory=lambda: _new_id("page"))
    title: str
    slug: str
    description: str | None = None
    status: PageStatus = "draft"
    published_at: datetime | None = None

    author_id: str
    tenant_id: str

    tags: set[str] = Field(default_factory=set)
    category: str | None = None
    seo: SeoMeta | None = None

    content: list[ContentBlock] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class ContentTemplate(BaseModel):
    id: str = Field(default_factory=lambda: _new_id("template"))
    name: str
    description: str = ""
    category: str
    content: list[ContentBlock] = Field(default_factory=list)
    is_public: bool = False
    created_by: str
    tenant_id: str
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
