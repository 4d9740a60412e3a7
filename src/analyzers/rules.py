"""Tag rule definitions."""

from dataclasses import dataclass

from analyzers.base import TagStatus


@dataclass(frozen=True)
class Lookup:
    """Where a tag's value lives in the document.

    ``attribute`` of ``None`` means the element's text content.
    """

    element: str
    match: tuple[tuple[str, str], ...] = ()
    attribute: str | None = None


@dataclass(frozen=True)
class TagRule:
    """A single inspected tag."""

    key: str
    lookups: tuple[Lookup, ...]  # Tried in order, first non-empty value wins
    points: int  # Awarded when present
    absent_status: TagStatus = TagStatus.MISSING
    absent_points: int = 0
    absent_message: str | None = None  # Required when absent_status is WARNING


def _meta(attr: str, key: str) -> Lookup:
    return Lookup(element="meta", match=((attr, key),), attribute="content")


def _open_graph(key: str) -> tuple[Lookup, ...]:
    # og:* is defined on `property`, some sites use `name`
    return (_meta("property", key), _meta("name", key))


def _twitter(key: str) -> tuple[Lookup, ...]:
    # twitter:* is defined on `name`, some sites use `property`
    return (_meta("name", key), _meta("property", key))


# =============================================================================
# Basic Tags
# =============================================================================

BASIC_RULES = (
    TagRule(
        key="title",
        lookups=(Lookup(element="title"),),
        points=20,
    ),
    TagRule(
        key="description",
        lookups=(_meta("name", "description"),),
        points=20,
    ),
    TagRule(
        key="robots",
        lookups=(_meta("name", "robots"),),
        points=10,
        # Lower risk than a missing title/description, so partial credit
        absent_status=TagStatus.WARNING,
        absent_points=5,
        absent_message="No robots meta tag found",
    ),
    TagRule(
        key="canonical",
        lookups=(
            Lookup(element="link", match=(("rel", "canonical"),), attribute="href"),
        ),
        points=10,
        absent_status=TagStatus.WARNING,
        absent_message="No canonical URL found",
    ),
)


# =============================================================================
# Open Graph Tags
# =============================================================================

OPEN_GRAPH_RULES = tuple(
    TagRule(key=key, lookups=_open_graph(key), points=2)
    for key in ("og:title", "og:description", "og:image", "og:type", "og:url")
)


# =============================================================================
# Twitter Card Tags
# =============================================================================

TWITTER_RULES = tuple(
    TagRule(key=key, lookups=_twitter(key), points=2)
    for key in (
        "twitter:card",
        "twitter:title",
        "twitter:description",
        "twitter:image",
    )
)


# Declaration order is display order
TAG_RULES: tuple[TagRule, ...] = BASIC_RULES + OPEN_GRAPH_RULES + TWITTER_RULES

TAG_KEYS: tuple[str, ...] = tuple(rule.key for rule in TAG_RULES)
