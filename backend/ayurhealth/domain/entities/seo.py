"""Domain value objects produced by the SEO analyzer — never persisted."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SEOAnalysis:
    """Score (0-100) plus the findings that produced it."""

    score: int
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    @property
    def grade(self) -> str:
        """Coarse band used by the admin UI: good / fair / poor."""
        if self.score >= 80:
            return "good"
        if self.score >= 60:
            return "fair"
        return "poor"


@dataclass(frozen=True)
class SEOChecklistItem:
    label: str
    passed: bool
