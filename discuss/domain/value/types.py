"""Value objects for discussion threads."""

from enum import Enum

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject


class Cursor(RootValueObject[str]):
    """Opaque pagination cursor pointing at the next page of older comments.

    The core never interprets it; an absent cursor means there is nothing
    more to fetch.
    """

    @field_validator("root")
    @classmethod
    def validate_cursor(cls, v: str) -> str:
        """Validate cursor is not empty."""
        if not v:
            raise ValueError("Cursor must not be empty")
        return v


class ThreadEventKind(str, Enum):
    """Kinds of events that change a post's comment tree."""

    COMMENTS_ADDED = "comments_added"
    NEW_COMMENT_ADDED = "new_comment_added"
    REPLY_COMMENTS_ADDED = "reply_comments_added"
    MORE_COMMENTS_ADDED = "more_comments_added"
    COMMENTS_LOADED = "comments_loaded"
