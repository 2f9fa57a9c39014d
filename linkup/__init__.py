"""LinkUp social network API package."""
