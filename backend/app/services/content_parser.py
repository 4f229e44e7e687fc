"""
In-app content parser.

Decodes a server-sent in-app message payload into a typed content variant,
chosen by the payload's ``contentType`` field.

Pipeline:
  1. parse_content reads contentType and picks a creator from _CREATORS
     (unknown or missing types fall back to plain HTML).
  2. decode_html_content extracts and validates the html body and reads
     the optional inAppDisplaySettings (padding + background alpha).
  3. The creator wraps the decoded fields in InAppHtmlContent or
     InboxHtmlContent.

Malformed input never raises. The only failures are a missing html body
("no html") and an html body without an href; both come back as the
``reason`` of an InAppContentParseResult. Any other malformed field is
replaced by its default.

Adding a new content type:
  1. Add the tag to ContentType.
  2. Write a create_<type>_content(payload) -> InAppContentParseResult.
  3. Register it in _CREATORS.
"""

import logging
import math
from typing import Any, Callable, Optional, Tuple

from app.constants import (
    AUTO_EXPAND,
    AUTO_EXPAND_PADDING,
    BACKGROUND_ALPHA_KEY,
    CONTENT_TYPE_KEY,
    DISPLAY_OPTION_KEY,
    DISPLAY_SETTINGS_KEY,
    HREF_MARKER,
    HTML_KEY,
    INBOX_ICON_KEY,
    INBOX_SUBTITLE_KEY,
    INBOX_TITLE_KEY,
    NO_HTML_REASON,
    PADDING_BOTTOM,
    PADDING_LEFT,
    PADDING_RIGHT,
    PADDING_TOP,
    PERCENTAGE_KEY,
)
from app.models.inapp_content import (
    ContentType,
    HtmlContent,
    InAppContentParseResult,
    InAppHtmlContent,
    InboxHtmlContent,
    Padding,
)
from app.services.json_values import get_dict, get_number, get_string

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shared HTML decoding
# ---------------------------------------------------------------------------

def decode_padding(value: Any) -> int:
    """
    Decode one side's padding descriptor.

    Returns -1 for {"displayOption": "AutoExpand"}, the truncated
    "percentage" when it is numeric, and 0 for anything else.
    """
    if not isinstance(value, dict):
        return 0

    if get_string(value, DISPLAY_OPTION_KEY) == AUTO_EXPAND:
        return AUTO_EXPAND_PADDING

    percentage = get_number(value, PERCENTAGE_KEY)
    if percentage is None:
        return 0
    if isinstance(percentage, float) and not math.isfinite(percentage):
        return 0
    return int(percentage)


def get_padding(settings: Optional[dict]) -> Padding:
    """Read all four sides from inAppDisplaySettings; absent sides are 0."""
    if settings is None:
        return Padding()

    sides = {}
    for side in (PADDING_TOP, PADDING_LEFT, PADDING_BOTTOM, PADDING_RIGHT):
        if side in settings:
            sides[side] = decode_padding(settings[side])
    return Padding(**sides)


def get_background_alpha(settings: Optional[dict]) -> float:
    if settings is None:
        return 0.0
    alpha = get_number(settings, BACKGROUND_ALPHA_KEY)
    if alpha is None:
        return 0.0
    try:
        return float(alpha)
    except OverflowError:
        # int too large for a float
        logger.debug("get_background_alpha: %r out of range, using 0.0", alpha)
        return 0.0


def decode_html_content(payload: Any) -> Tuple[Optional[HtmlContent], Optional[str]]:
    """
    Decode the fields shared by every HTML content variant.

    Returns (content, None) on success or (None, reason) on failure.
    """
    html = get_string(payload, HTML_KEY)
    if html is None:
        return None, NO_HTML_REASON

    if HREF_MARKER not in html.lower():
        return None, f"No {HREF_MARKER} tag found in in-app html payload {html}"

    settings = get_dict(payload, DISPLAY_SETTINGS_KEY)
    content = HtmlContent(
        padding=get_padding(settings),
        background_alpha=get_background_alpha(settings),
        html=html,
    )
    return content, None


# ---------------------------------------------------------------------------
# Variant creators
# ---------------------------------------------------------------------------

def create_inapp_html_content(payload: Any) -> InAppContentParseResult:
    html_content, reason = decode_html_content(payload)
    if html_content is None:
        return InAppContentParseResult.failure(reason)

    return InAppContentParseResult.success(
        InAppHtmlContent(
            padding=html_content.padding,
            background_alpha=html_content.background_alpha,
            html=html_content.html,
        )
    )


def create_inbox_html_content(payload: Any) -> InAppContentParseResult:
    """
    Decode inbox HTML content.

    Inbox metadata (title, subtitle, icon) is only read once the shared
    HTML decoding has succeeded.
    """
    html_content, reason = decode_html_content(payload)
    if html_content is None:
        return InAppContentParseResult.failure(reason)

    return InAppContentParseResult.success(
        InboxHtmlContent(
            padding=html_content.padding,
            background_alpha=html_content.background_alpha,
            html=html_content.html,
            title=get_string(payload, INBOX_TITLE_KEY),
            subtitle=get_string(payload, INBOX_SUBTITLE_KEY),
            icon=get_string(payload, INBOX_ICON_KEY),
        )
    )


# ---------------------------------------------------------------------------
# Registry and dispatcher
# ---------------------------------------------------------------------------

_CREATORS: dict[ContentType, Callable[[Any], InAppContentParseResult]] = {
    ContentType.HTML: create_inapp_html_content,
    ContentType.INBOX_HTML: create_inbox_html_content,
}

# Types without a dedicated creator (alert, banner, anything unknown)
_DEFAULT_CREATOR = create_inapp_html_content


def resolve_content_type(payload: Any) -> ContentType:
    """Return the ContentType declared by the payload, defaulting to HTML."""
    return ContentType.from_string(get_string(payload, CONTENT_TYPE_KEY))


def creator_for(content_type: ContentType) -> Callable[[Any], InAppContentParseResult]:
    return _CREATORS.get(content_type, _DEFAULT_CREATOR)


def parse_content(payload: Any) -> InAppContentParseResult:
    """
    Parse a raw in-app content payload.

    The payload is never mutated. Always returns a result: either
    result.content holds an InAppHtmlContent / InboxHtmlContent, or
    result.reason explains why decoding failed.
    """
    content_type = resolve_content_type(payload)
    declared = get_string(payload, CONTENT_TYPE_KEY)
    if declared is not None and declared != content_type.value:
        logger.debug("parse_content: unknown contentType %r, decoding as html", declared)

    result = creator_for(content_type)(payload)
    if not result.ok:
        logger.debug("parse_content: %s payload rejected: %s", content_type.value, result.reason)
    return result
