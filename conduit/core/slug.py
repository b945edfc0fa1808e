"""Article Slugs — URL-safe identifiers derived from titles.

Invariants:
    - Output only contains [a-z0-9-], no leading/trailing/double hyphens
    - A title with no usable characters still yields a non-empty slug

Design Decisions:
    - Suffix supplied by the caller: keeps this function deterministic and
      leaves uniqueness to the articles.slug constraint
"""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
MAX_BASE_LENGTH = 80


def slugify(title: str, suffix: str | None = None) -> str:
    """Lowercase ASCII slug of `title`, optionally followed by `-suffix`."""
    ascii_title = (
        unicodedata.normalize("NFKD", title)
        .encode("ascii", "ignore")
        .decode("ascii")
        .lower()
    )
    base = _NON_ALNUM.sub("-", ascii_title).strip("-")[:MAX_BASE_LENGTH].rstrip("-")
    if not base:
        base = "article"
    return f"{base}-{suffix}" if suffix else base
