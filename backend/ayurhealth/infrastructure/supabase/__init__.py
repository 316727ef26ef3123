"""Supabase infrastructure package."""

from .credentials import BearerHeaderCredentialProvider, StaticCredentialProvider
from .supabase_blog_repository import SupabaseBlogRepository

__all__ = [
    "BearerHeaderCredentialProvider",
    "StaticCredentialProvider",
    "SupabaseBlogRepository",
]
