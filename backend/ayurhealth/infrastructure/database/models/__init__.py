from .blog import BlogModel

__all__ = ["BlogModel"]
