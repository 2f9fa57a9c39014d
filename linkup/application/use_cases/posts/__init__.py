"""Use cases for managing posts."""

from .manage_posts import create_post, delete_post, get_post, list_posts, update_post

__all__ = ["create_post", "delete_post", "get_post", "list_posts", "update_post"]
