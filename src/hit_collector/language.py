from __future__ import annotations


def get_language(accept_language: str) -> str | None:
    """Primary language of an Accept-Language header, lower-cased.

    Quality values are ignored, the first listed tag wins.
    """
    if not accept_language:
        return None
    first_group = accept_language.split(";", 1)[0]
    primary = first_group.split(",", 1)[0]
    return primary.lower() or None
