import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

# Notion ids are UUIDs, written either dashed or as 32 bare hex characters.
# Page URLs usually append the id to a slug: "My-Page-036948842f494993a50d4166bff5346d".
_ID_PATTERN = re.compile(r"\b([a-f0-9]{32})$", re.IGNORECASE)
_UUID_PATTERN = re.compile(
    r"\b([a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12})$",
    re.IGNORECASE,
)


def uuid_to_id(uuid: str) -> str:
    """Strip dashes from a dashed UUID."""
    return uuid.replace("-", "")


def id_to_uuid(page_id: str) -> str:
    """Format a 32 character id as a dashed UUID."""
    page_id = uuid_to_id(page_id)
    return (
        f"{page_id[:8]}-{page_id[8:12]}-{page_id[12:16]}-"
        f"{page_id[16:20]}-{page_id[20:]}"
    )


def parse_page_id(value: Optional[str]) -> Optional[str]:
    """
    Extract a normalized Notion page id from an id, UUID or page slug.

    Returns the lowercase 32 character form, or None if no id is present.
    """
    if not value or not isinstance(value, str):
        return None

    candidate = value.strip().split("?", 1)[0].split("#", 1)[0].rstrip("/")

    match = _ID_PATTERN.search(candidate)
    if match:
        return match.group(1).lower()

    match = _UUID_PATTERN.search(candidate)
    if match:
        return uuid_to_id(match.group(1)).lower()

    logger.debug(f"No Notion id found in '{value}'")
    return None


def is_valid_page_id(value: Optional[str]) -> bool:
    return parse_page_id(value) is not None
