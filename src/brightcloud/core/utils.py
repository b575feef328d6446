"""Core utility functions for the BrightCloud client."""

from dataclasses import replace
from typing import Sequence

import httpx

from brightcloud.core.exceptions import InvalidURLError
from brightcloud.core.models import CategoryInfo, UrlLookupResult


def validate_lookup_url(url: str) -> str:
    """
    Check that a user-supplied URL can be looked up.

    URLs without an http(s) scheme are validated as if ``http://`` were
    prepended. The original string is returned stripped of whitespace;
    the web service accepts bare hosts.

    Raises:
        InvalidURLError: If the URL is empty or has no host
    """
    candidate = url.strip() if url else ""
    if not candidate:
        raise InvalidURLError("URL must not be empty")

    lowered = candidate.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        to_parse = candidate
    else:
        to_parse = f"http://{candidate}"

    try:
        parsed = httpx.URL(to_parse)
    except httpx.InvalidURL as e:
        raise InvalidURLError(f"Invalid URL '{url}': {e}") from e

    if not parsed.host:
        raise InvalidURLError(f"Invalid URL '{url}': missing host")

    return candidate


def join_categories(
    result: UrlLookupResult,
    taxonomy: Sequence[CategoryInfo],
) -> UrlLookupResult:
    """
    Fill in category names and groups from the category list.

    Lookup responses only carry category IDs and confidence scores.
    IDs missing from the taxonomy are kept with empty name and group.

    Returns:
        A new UrlLookupResult; the input is left untouched
    """
    by_id = {category.id: category for category in taxonomy}

    joined = []
    for category in result.categories:
        known = by_id.get(category.id)
        if known is None:
            joined.append(category)
        else:
            joined.append(category.with_details(known.name, known.group))

    return replace(result, categories=tuple(joined))
