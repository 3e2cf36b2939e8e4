"""
Case-insensitive substring search over a listing's text fields and tags.
"""
from typing import Any, Iterable, Optional, Sequence


def _candidates(listing: Any, fields: Optional[Sequence[str]]) -> Iterable[str]:
    if fields is None:
        texts = listing.text_fields
    else:
        texts = (getattr(listing, name, "") for name in fields)
    for text in texts:
        if text:
            yield text
    for tag in getattr(listing, "tags", None) or ():
        if tag:
            yield tag


def matches(listing: Any, term: Optional[str], fields: Optional[Sequence[str]] = None) -> bool:
    """
    Return True if ``term`` occurs in any searchable field or tag.

    ``fields`` overrides the listing's own ``text_fields`` with a list of
    attribute names. An empty term matches everything.
    """
    if not term or not term.strip():
        return True
    needle = term.strip().lower()
    return any(needle in text.lower() for text in _candidates(listing, fields))
