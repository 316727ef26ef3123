from .blog_repository import BlogRepository, PROTECTED_FIELDS, updatable_fields
from .credential_provider import CredentialProvider

__all__ = [
    "BlogRepository",
    "PROTECTED_FIELDS",
    "updatable_fields",
    "CredentialProvider",
]
