from .blog_repository import SQLAlchemyBlogRepository

__all__ = ["SQLAlchemyBlogRepository"]
