"""
Pydantic models for decoded in-app message content.

A raw server payload is decoded into exactly one content variant
(plain in-app HTML or inbox HTML) wrapped in an InAppContentParseResult.
All models are immutable value objects created fresh for each parse.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from app.constants import AUTO_EXPAND_PADDING


class ContentType(str, Enum):
    HTML = "html"
    ALERT = "alert"
    BANNER = "banner"
    INBOX_HTML = "inboxHtml"

    @classmethod
    def from_string(cls, value: Any) -> "ContentType":
        """
        Map a server contentType string to a tag.

        Matching is exact and case-sensitive. Missing, non-string and
        unknown values resolve to HTML so newer server types still render.
        """
        if not isinstance(value, str):
            return cls.HTML
        try:
            return cls(value)
        except ValueError:
            return cls.HTML


class Padding(BaseModel):
    """Edge padding per side. -1 on a side means auto-expand."""

    model_config = ConfigDict(frozen=True)

    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0

    def is_auto_expand(self, side: str) -> bool:
        return getattr(self, side) == AUTO_EXPAND_PADDING


class HtmlContent(BaseModel):
    """Fields shared by every HTML-based content variant."""

    model_config = ConfigDict(frozen=True)

    padding: Padding = Padding()
    background_alpha: float = 0.0
    html: str


class InAppHtmlContent(HtmlContent):
    type: ContentType = ContentType.HTML


class InboxHtmlContent(HtmlContent):
    """HTML content plus the metadata shown in a message inbox list."""

    type: ContentType = ContentType.INBOX_HTML
    title: Optional[str] = None
    subtitle: Optional[str] = None
    icon: Optional[str] = None


ParsedContent = Union[InboxHtmlContent, InAppHtmlContent]


class InAppContentParseResult(BaseModel):
    """
    Either decoded content or a human-readable failure reason, never both.

    Build instances with success() / failure() rather than the constructor.
    """

    model_config = ConfigDict(frozen=True)

    content: Optional[ParsedContent] = None
    reason: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one_arm(self) -> "InAppContentParseResult":
        if (self.content is None) == (self.reason is None):
            raise ValueError("exactly one of content or reason must be set")
        return self

    @classmethod
    def success(cls, content: ParsedContent) -> "InAppContentParseResult":
        return cls(content=content)

    @classmethod
    def failure(cls, reason: str) -> "InAppContentParseResult":
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.content is not None
