from datetime import datetime
from typing import Any

from content_engine.domain.entities import ContentEngineError, ContentPage, PageStatus

# published -> draft is allowed but not special-cased: published_at is kept.
ALLOWED_TRANSITIONS: dict[PageStatus, frozenset[PageStatus]] = {
    "draft": frozenset(["published", "archived"]),
    "published": frozenset(["archived", "draft"]),
    "archived": frozenset(["draft"]),
}


class InvalidTransitionError(ContentEngineError):
    """Raised when a page status transition is not allowed."""

    def __init__(self, from_status: str, to_status: str) -> None:
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(f"Cannot transition from '{from_status}' to '{to_status}'")


def can_transition(current: PageStatus, new: PageStatus) -> bool:
    """
    Determine if a status transition is allowed.
    """
    if current == new:
        return True
    return new in ALLOWED_TRANSITIONS.get(current, frozenset())


def transition(page: ContentPage, new_status: PageStatus, now: datetime) -> ContentPage:
    """
    Return a NEW ContentPage with the updated status and timestamps.

    Entering 'published' sets published_at only if it is not already set, so
    republishing keeps the first publish time.

    Raises:
        InvalidTransitionError: If the transition is not allowed.
    """
    if page.status == new_status:
        return page.model_copy(deep=True)

    if not can_transition(page.status, new_status):
        raise InvalidTransitionError(page.status, new_status)

    updates: dict[str, Any] = {
        "status": new_status,
        "updated_at": now,
    }

    if new_status == "published" and page.published_at is None:
        updates["published_at"] = now

    return page.model_copy(update=updates, deep=True)
