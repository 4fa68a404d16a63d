"""Pydantic models for request/response schemas."""
import re
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any, Union

LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")


class Resource(BaseModel):
    """A study resource row from the hosted data store."""
    id: Optional[Union[int, str]] = None
    book: Optional[str] = Field(default=None, description="Canonical book name, e.g. '1 Corinthians'")
    chapter: Optional[int] = Field(default=None, description="First chapter; absent for whole-book resources")
    chapter_end: Optional[int] = None
    verse_start: Optional[int] = None
    verse_end: Optional[int] = None
    secondary_scripture: Optional[str] = Field(default=None, description="Free-text citations, e.g. 'Matthew 5, Luke 6:20-26'")
    type: Optional[str] = None
    title: str = ""
    author: Optional[str] = None
    url: Optional[str] = None
    price: Optional[str] = None
    published_year: Optional[int] = None
    description: Optional[str] = None
    image: Optional[str] = None

    @field_validator("chapter", "chapter_end", "verse_start", "verse_end", "published_year", mode="before")
    @classmethod
    def _coerce_optional_int(cls, value: Any) -> Optional[int]:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        # leading digits win: "2020-05" -> 2020, "12a" -> 12
        match = LEADING_INT_PATTERN.match(str(value))
        return int(match.group(1)) if match else None

    @field_validator("title", mode="before")
    @classmethod
    def _default_title(cls, value: Any) -> str:
        return value or ""

    @field_validator("price", mode="before")
    @classmethod
    def _stringify_price(cls, value: Any) -> Any:
        # price is free text ("Free", "$12.99"); stores sometimes return numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ResourceGroups(BaseModel):
    """Resources grouped by type."""
    sermons: List[Resource] = Field(default_factory=list)
    commentaries: List[Resource] = Field(default_factory=list)
    devotionals: List[Resource] = Field(default_factory=list)
    books: List[Resource] = Field(default_factory=list)
    videos: List[Resource] = Field(default_factory=list)


class ChapterResourcesResponse(BaseModel):
    """Response model for a chapter page."""
    book: str = Field(..., description="Book display name")
    slug: str = Field(..., description="Book URL slug")
    chapter: int = Field(..., ge=1)
    total_chapters: int = Field(..., ge=1)
    previous_chapter: Optional[int] = None
    next_chapter: Optional[int] = None
    resource_count: int = 0
    primary: ResourceGroups
    secondary: ResourceGroups


class BookInfo(BaseModel):
    """A Bible book with its chapter count."""
    name: str
    slug: str
    chapters: int = Field(..., ge=1)


class AuthorsResponse(BaseModel):
    authors: List[str]


class CitationItem(BaseModel):
    """A parsed secondary-scripture segment."""
    book: str
    chapter_start: int
    chapter_end: int
    verse_start: Optional[int] = None
    verse_end: Optional[int] = None


class CitationParseResponse(BaseModel):
    citation: str
    references: List[CitationItem]


class ReferenceMatchResponse(BaseModel):
    citation: str
    book: str
    chapter: int
    matches: bool


class PaymentIntentRequest(BaseModel):
    """Request model for creating a donation payment intent."""
    amount: Optional[int] = Field(default=None, description="Amount in cents")
    currency: str = Field(default="usd", min_length=3, max_length=3)
    metadata: Dict[str, str] = Field(default_factory=dict)


class PaymentIntentResponse(BaseModel):
    client_secret: str
    payment_intent_id: str


class HealthCheck(BaseModel):
    """Health check response model."""
    status: str
    timestamp: datetime
    version: str = "1.0.0"
