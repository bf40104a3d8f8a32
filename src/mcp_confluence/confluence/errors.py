"""Classification of transport failures into Confluence error kinds."""

import logging
from typing import Any

from requests.exceptions import RequestException

from ..exceptions import ConfluenceError, ConfluenceErrorCode
from .constants import LABEL_EXISTS_MARKERS

logger = logging.getLogger("mcp-confluence.confluence.errors")


def get_status_code(error: RequestException) -> int | None:
    """HTTP status of the failed response, or None for network failures."""
    response = getattr(error, "response", None)
    return response.status_code if response is not None else None


def get_error_message(error: RequestException) -> str:
    """
    Extract the server's description of a failure.

    Prefers the JSON ``message`` of a legacy error body, then the
    ``errors[].title``/``detail`` entries of a v2 error body, then the raw
    response text. Falls back to the exception text only when there is no
    response at all.
    """
    response = getattr(error, "response", None)
    if response is None:
        return str(error)

    try:
        payload: Any = response.json()
    except ValueError:
        return response.text or ""

    if isinstance(payload, dict):
        if payload.get("message"):
            return str(payload["message"])
        details = [
            entry.get("detail") or entry.get("title")
            for entry in payload.get("errors") or []
            if isinstance(entry, dict)
        ]
        if any(details):
            return "; ".join(detail for detail in details if detail)
    return response.text or ""


def classify_request_error(
    error: RequestException,
    action: str,
    *,
    not_found: ConfluenceErrorCode = ConfluenceErrorCode.PAGE_NOT_FOUND,
    not_found_message: str = "Page not found",
    default: ConfluenceErrorCode = ConfluenceErrorCode.UNKNOWN,
) -> ConfluenceError:
    """
    Map a transport failure onto the error taxonomy.

    401/403 become INSUFFICIENT_PERMISSIONS, 404 the operation's not-found
    kind, anything else (including network failures) the operation's
    default kind.

    Args:
        error: The requests exception raised by the transport
        action: What was being attempted, e.g. "get page 123"
        not_found: Error kind for a 404
        not_found_message: Message for a 404
        default: Error kind for any other failure

    Returns:
        The classified error; callers raise it ``from error``
    """
    status_code = get_status_code(error)
    detail = get_error_message(error)

    if status_code in (401, 403):
        result = ConfluenceError(
            f"Insufficient permissions to {action}",
            ConfluenceErrorCode.INSUFFICIENT_PERMISSIONS,
            status_code,
        )
    elif status_code == 404:
        result = ConfluenceError(not_found_message, not_found, status_code)
    else:
        result = ConfluenceError(f"Failed to {action}: {detail}", default, status_code)

    logger.error(f"Error trying to {action} ({status_code}): {detail}")
    return result


def is_version_conflict(error: RequestException) -> bool:
    """A 409, or a 400 whose message blames the version number."""
    status_code = get_status_code(error)
    if status_code == 409:
        return True
    return status_code == 400 and "version" in get_error_message(error).lower()


def classify_update_error(error: RequestException, page_id: str) -> ConfluenceError:
    """Classify a failed page update; stale versions are retryable conflicts."""
    if is_version_conflict(error):
        logger.warning(f"Version conflict updating page {page_id}")
        return ConfluenceError(
            f"Page {page_id} was modified concurrently; "
            "fetch the current version and retry",
            ConfluenceErrorCode.VERSION_CONFLICT,
            get_status_code(error),
        )
    return classify_request_error(error, f"update page {page_id}")


def classify_add_label_error(
    error: RequestException, page_id: str, name: str
) -> ConfluenceError:
    """Classify a failed label addition; duplicates become LABEL_EXISTS."""
    status_code = get_status_code(error)
    message = get_error_message(error).lower()
    if status_code not in (401, 403, 404) and any(
        marker in message for marker in LABEL_EXISTS_MARKERS
    ):
        logger.info(f"Label '{name}' already present on page {page_id}")
        return ConfluenceError(
            f'Label "{name}" already exists on this page',
            ConfluenceErrorCode.LABEL_EXISTS,
            status_code,
        )
    return classify_request_error(error, f"add label '{name}' to page {page_id}")


def classify_remove_label_error(
    error: RequestException, page_id: str, name: str
) -> ConfluenceError:
    """
    Classify a failed label removal.

    A 404 is ambiguous between a missing page and a missing label; the
    server message decides: mentioning "label" means LABEL_NOT_FOUND.
    """
    if get_status_code(error) == 404 and "label" in get_error_message(error).lower():
        logger.info(f"Label '{name}' not found on page {page_id}")
        return ConfluenceError(
            f'Label "{name}" not found on page',
            ConfluenceErrorCode.LABEL_NOT_FOUND,
            404,
        )
    return classify_request_error(error, f"remove label '{name}' from page {page_id}")
