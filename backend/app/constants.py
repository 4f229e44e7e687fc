"""
Payload field names and literal values for in-app message content.

The dispatcher, the shared HTML decoder and the variant wrappers all read
the server payload through these names.
"""

# Top-level payload keys
CONTENT_TYPE_KEY = "contentType"
HTML_KEY = "html"
DISPLAY_SETTINGS_KEY = "inAppDisplaySettings"

# Inbox-only metadata
INBOX_TITLE_KEY = "inboxTitle"
INBOX_SUBTITLE_KEY = "inboxSubtitle"
INBOX_ICON_KEY = "inboxIcon"

# Keys inside inAppDisplaySettings
BACKGROUND_ALPHA_KEY = "backGroundAlpha"
PADDING_TOP = "top"
PADDING_LEFT = "left"
PADDING_RIGHT = "right"
PADDING_BOTTOM = "bottom"

# Keys inside a single padding descriptor
DISPLAY_OPTION_KEY = "displayOption"
PERCENTAGE_KEY = "percentage"
AUTO_EXPAND = "AutoExpand"

# Decoded padding value meaning "let the renderer size this side"
AUTO_EXPAND_PADDING = -1

# The html body must contain this (case-insensitive) to be clickable
HREF_MARKER = "href"

NO_HTML_REASON = "no html"
