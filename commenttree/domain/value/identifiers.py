"""Strongly typed identifiers for comment tree entities.

Using NewType keeps comment IDs distinct from plain integers
(page numbers, counts) in signatures.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
