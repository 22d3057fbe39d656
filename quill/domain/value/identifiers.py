"""Strongly typed identifiers for Quill domain entities.

Identifiers are integers reserved from the store's sequences. NewType keeps
an ArticleId from being passed where a CommentId is expected.
"""

from typing import NewType

# Core domain entity identifiers
UserId = NewType("UserId", int)
ArticleId = NewType("ArticleId", int)
CommentId = NewType("CommentId", int)
CommentLikeId = NewType("CommentLikeId", int)
DecorationId = NewType("DecorationId", int)
