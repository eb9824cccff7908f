"""Strongly typed identifiers for discussion threads.

Using NewType for strong typing prevents mixing up post and comment IDs
and makes the code more self-documenting. Identifiers are opaque strings
assigned by the remote comment source.
"""

from typing import NewType

PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
