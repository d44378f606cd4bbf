"""
Sanitizing of free-text bookmark fields before they are returned to a client.

Stored rows keep the raw submitted text. Every read path runs title and
description through sanitize() so that the response cannot execute script in
a browser, while the allow-list can change without a data migration.
"""
from bleach.sanitizer import Cleaner

ALLOWED_TAGS = frozenset({
    "a",
    "abbr",
    "b",
    "blockquote",
    "br",
    "code",
    "em",
    "i",
    "img",
    "li",
    "ol",
    "p",
    "pre",
    "s",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "u",
    "ul",
})

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "target"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# strip=False: tags outside the allow-list are escaped (<script> -> &lt;script&gt;)
# rather than removed, so the text stays readable
_CLEANER = Cleaner(
    tags=ALLOWED_TAGS,
    attributes=ALLOWED_ATTRIBUTES,
    protocols=ALLOWED_PROTOCOLS,
    strip=False,
    strip_comments=True,
)


def sanitize(text: str | None) -> str | None:
    """
    Escape or strip active markup from a text value.

    Disallowed tags are escaped, disallowed attributes (on* handlers, style, ...)
    and javascript: links are dropped. Idempotent: sanitizing an already
    sanitized value returns it unchanged. None passes through.
    """
    if text is None:
        return None
    return _CLEANER.clean(text)
