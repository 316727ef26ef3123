"""Domain entities — pure Python business objects, no framework dependencies."""

import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

# Characters per minute of reading, as estimated by the editor
READING_CHARS_PER_MINUTE = 200


class BlogCategory(str, Enum):
    """Fixed set of categories a blog post can be filed under."""

    AYURVEDA = "ayurveda"
    MENTAL_HEALTH = "mental-health"
    NUTRITION = "nutrition"
    YOGA = "yoga"
    WELLNESS = "wellness"


@dataclass(frozen=True)
class CategoryInfo:
    """Display metadata for a category landing page."""

    category: BlogCategory
    name: str
    description: str


CATEGORY_CATALOGUE: dict[BlogCategory, CategoryInfo] = {
    BlogCategory.AYURVEDA: CategoryInfo(
        category=BlogCategory.AYURVEDA,
        name="Ayurveda",
        description=(
            "Ancient wisdom for modern wellness. Discover the 5000-year-old healing "
            "system that balances mind, body, and spirit."
        ),
    ),
    BlogCategory.MENTAL_HEALTH: CategoryInfo(
        category=BlogCategory.MENTAL_HEALTH,
        name="Mental Health",
        description=(
            "Nurture your mind with evidence-based approaches to mental wellness, "
            "mindfulness, and emotional balance."
        ),
    ),
    BlogCategory.NUTRITION: CategoryInfo(
        category=BlogCategory.NUTRITION,
        name="Nutrition",
        description=(
            "Fuel your body with holistic nutrition principles that support optimal "
            "health and vitality."
        ),
    ),
    BlogCategory.YOGA: CategoryInfo(
        category=BlogCategory.YOGA,
        name="Yoga & Meditation",
        description=(
            "Unite body, mind, and spirit through ancient practices of yoga, "
            "meditation, and breathwork."
        ),
    ),
    BlogCategory.WELLNESS: CategoryInfo(
        category=BlogCategory.WELLNESS,
        name="General Wellness",
        description="Everyday habits and practical guidance for a balanced, healthy life.",
    ),
}


@dataclass
class Blog:
    """Core domain entity representing a blog post.

    Every text field may be absent (``None``) when it comes from the store;
    consumers such as the SEO analyzer treat absence as a condition, not an error.
    """

    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    slug: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    keywords: list[str] = field(default_factory=list)
    featured_image: str | None = None
    author: str | None = None
    category: str | None = BlogCategory.AYURVEDA.value
    published: bool = False
    published_at: datetime | None = None
    views: int = 0
    likes: int = 0
    reading_time: int = 0
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def matches_search(self, term: str) -> bool:
        """Case-insensitive substring match on title, excerpt, or any keyword."""
        needle = term.lower()
        if self.title and needle in self.title.lower():
            return True
        if self.excerpt and needle in self.excerpt.lower():
            return True
        return any(needle in keyword.lower() for keyword in self.keywords or [])


def compute_reading_time(content: str | None) -> int:
    """Estimated reading time in minutes, derived from the content length."""
    return math.ceil(len(content or "") / READING_CHARS_PER_MINUTE)


def generate_slug(title: str) -> str:
    """Build a URL-safe slug from a title."""
    slug = title.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
