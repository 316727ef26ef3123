"""Rule-based SEO scoring for a single blog post.

Pure functions — no I/O, no shared state. The same blog always yields the
same analysis, so callers may re-run it freely (e.g. on every editor keystroke).

Rules, applied in order (score starts at 100, floored at 0):

    title             absent or < 30 chars  -15   issue
                      > 60 chars            -10   issue
    meta description  missing               -20   issue
                      < 120 or > 160 chars  -10   issue
    keywords          none                  -15   issue
                      1-2                   -5    suggestion
    content           absent or < 1000 chars -15  issue
    featured image    absent                -10   issue
    slug              absent or > 50 chars  -5    issue

Content length is a character count even though the advice talks about
words; thresholds are kept as-is so existing scores stay comparable.
"""

from ayurhealth.domain.entities import Blog, SEOAnalysis, SEOChecklistItem

TITLE_MIN, TITLE_MAX = 30, 60
META_DESCRIPTION_MIN, META_DESCRIPTION_MAX = 120, 160
KEYWORDS_RECOMMENDED = 3
CONTENT_MIN = 1000
SLUG_MAX = 50


def analyze_seo(blog: Blog) -> SEOAnalysis:
    """Score a blog and collect the findings behind the score."""
    issues: list[str] = []
    suggestions: list[str] = []
    score = 100

    if not blog.title or len(blog.title) < TITLE_MIN:
        issues.append("Title is too short (recommended: 30-60 characters)")
        score -= 15
    elif len(blog.title) > TITLE_MAX:
        issues.append("Title is too long (recommended: 30-60 characters)")
        score -= 10

    if not blog.meta_description:
        issues.append("Missing meta description")
        score -= 20
    elif len(blog.meta_description) < META_DESCRIPTION_MIN:
        issues.append("Meta description is too short (recommended: 120-160 characters)")
        score -= 10
    elif len(blog.meta_description) > META_DESCRIPTION_MAX:
        issues.append("Meta description is too long (recommended: 120-160 characters)")
        score -= 10

    if not blog.keywords:
        issues.append("No keywords defined")
        score -= 15
    elif len(blog.keywords) < KEYWORDS_RECOMMENDED:
        suggestions.append("Consider adding more keywords (3-5 recommended)")
        score -= 5

    if not blog.content or len(blog.content) < CONTENT_MIN:
        issues.append("Content is too short (recommended: 1000+ words)")
        score -= 15

    if not blog.featured_image:
        issues.append("Missing featured image")
        score -= 10

    if not blog.slug or len(blog.slug) > SLUG_MAX:
        issues.append("URL slug should be shorter and more descriptive")
        score -= 5

    return SEOAnalysis(score=max(0, score), issues=issues, suggestions=suggestions)


def seo_checklist(blog: Blog) -> list[SEOChecklistItem]:
    """Pass/fail view of the same rules, one row per check."""
    title_len = len(blog.title or "")
    meta_len = len(blog.meta_description or "")
    return [
        SEOChecklistItem("Title (30-60 chars)", TITLE_MIN <= title_len <= TITLE_MAX),
        SEOChecklistItem(
            "Meta Description (120-160 chars)",
            META_DESCRIPTION_MIN <= meta_len <= META_DESCRIPTION_MAX,
        ),
        SEOChecklistItem("Keywords (3+ tags)", len(blog.keywords or []) >= KEYWORDS_RECOMMENDED),
        SEOChecklistItem("Featured Image", bool(blog.featured_image)),
        SEOChecklistItem("Content Length (1000+ words)", len(blog.content or "") >= CONTENT_MIN),
        SEOChecklistItem("URL Slug Optimized", bool(blog.slug) and len(blog.slug) <= SLUG_MAX),
    ]
