"""
Constants and default values for model conversions.
"""

EMPTY_STRING = ""
UNKNOWN = "Unknown"

CONFLUENCE_DEFAULT_ID = "0"
CONFLUENCE_UNKNOWN_AUTHOR = "unknown"

# Labels added without an explicit namespace live in the global one
CONFLUENCE_GLOBAL_LABEL_PREFIX = "global"

# Raw markup representation pages are stored and submitted in
STORAGE_REPRESENTATION = "storage"

# Space defaults
CONFLUENCE_DEFAULT_SPACE_TYPE = "global"
CONFLUENCE_DEFAULT_STATUS = "current"
