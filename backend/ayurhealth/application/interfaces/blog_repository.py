"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any

from ayurhealth.domain.entities import Blog


class BlogRepository(ABC):
    """Port for blog persistence — implemented in the infrastructure layer.

    Every lookup by id or slug raises ``EntityNotFoundError`` when nothing
    matches; store failures propagate as ``BlogStoreError``. Nothing is retried
    or cached — each call is a fresh request against the store.
    """

    @abstractmethod
    async def list_all(self) -> list[Blog]:
        """All blogs, newest ``created_at`` first."""
        ...

    @abstractmethod
    async def list_published(self) -> list[Blog]:
        """Published blogs only, newest ``published_at`` first."""
        ...

    @abstractmethod
    async def list_top_viewed(self, limit: int = 10) -> list[Blog]:
        """Published blogs ordered by ``views`` descending."""
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Blog:
        """Retrieve exactly one blog by its unique slug."""
        ...

    @abstractmethod
    async def get_by_id(self, blog_id: str) -> Blog:
        """Retrieve exactly one blog by its ID."""
        ...

    @abstractmethod
    async def create(self, blog: Blog) -> Blog:
        """Persist a new blog and return it with the store-assigned ID."""
        ...

    @abstractmethod
    async def update(self, blog_id: str, fields: dict[str, Any]) -> Blog:
        """Merge ``fields`` into the stored blog and refresh ``updated_at``."""
        ...

    @abstractmethod
    async def increment_views(self, blog_id: str) -> int:
        """Atomically add one view on the store side. Returns the new count."""
        ...

    @abstractmethod
    async def increment_likes(self, blog_id: str) -> int:
        """Atomically add one like on the store side. Returns the new count."""
        ...


# Counters change only via the increment operations.
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at", "views", "likes"})


def updatable_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Validate a partial update payload, rejecting protected fields."""
    protected = PROTECTED_FIELDS.intersection(fields)
    if protected:
        raise ValueError(f"Fields cannot be set through update: {', '.join(sorted(protected))}")
    return dict(fields)
