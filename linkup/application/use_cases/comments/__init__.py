"""Use cases for post comments."""

from .manage_comments import add_comment, list_comments

__all__ = ["add_comment", "list_comments"]
