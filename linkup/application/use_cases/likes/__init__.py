"""Use cases for post likes."""

from .manage_likes import is_post_liked, like_post, list_liked_posts, unlike_post

__all__ = ["is_post_liked", "like_post", "list_liked_posts", "unlike_post"]
