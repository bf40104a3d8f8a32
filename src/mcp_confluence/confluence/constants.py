"""Constants specific to Confluence operations."""

DEFAULT_LIMIT = 25
FIND_PAGE_LIMIT = 10

# Legacy content expansions
PAGE_EXPAND = "space,version,body.storage"
FIND_PAGE_EXPAND = "space,version"
UPDATE_EXPAND = "version,space,ancestors"
SEARCH_EXPAND = "space,version,body.view"

VERSION_MESSAGE_TEMPLATE = "Updated via MCP at {timestamp}"

# Server messages that identify a duplicate label
LABEL_EXISTS_MARKERS = ("already has the label", "already exists")
