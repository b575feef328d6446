"""XML response decoding for the BrightCloud web service.

All responses share the envelope ``<bcap><response>...</response></bcap>``.
Missing scalar elements decode to zero values; malformed values raise
DecodeError.
"""

import xml.etree.ElementTree as ET
from typing import Optional

from brightcloud.core.exceptions import DecodeError
from brightcloud.core.models import CategoryInfo, HeartBeatResult, UrlLookupResult


ROOT_TAG = "bcap"

_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}


def _parse_response(body: bytes | str) -> ET.Element:
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise DecodeError(f"Malformed XML response: {e}") from e

    if root.tag != ROOT_TAG:
        raise DecodeError(f"Unexpected root element <{root.tag}>, expected <{ROOT_TAG}>")

    response = root.find("response")
    if response is None:
        raise DecodeError("Missing <response> element")
    return response


def _text(element: ET.Element, path: str) -> str:
    child = element.find(path)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


def _int(element: ET.Element, path: str) -> int:
    value = _text(element, path)
    if not value:
        return 0
    try:
        return int(value)
    except ValueError as e:
        raise DecodeError(f"<{path}> is not an integer: {value!r}") from e


def _bool(element: ET.Element, path: str) -> bool:
    value = _text(element, path).lower()
    if not value:
        return False
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise DecodeError(f"<{path}> is not a boolean: {value!r}")


def _category(cat: ET.Element) -> CategoryInfo:
    return CategoryInfo(
        id=_int(cat, "catid"),
        name=_text(cat, "catname"),
        group=_text(cat, "catgroup"),
        confidence=_int(cat, "conf"),
    )


def _categories(response: ET.Element) -> tuple[CategoryInfo, ...]:
    return tuple(_category(cat) for cat in response.findall("categories/cat"))


def decode_url_info(body: bytes | str) -> UrlLookupResult:
    """Decode a URL lookup response."""
    response = _parse_response(body)
    return UrlLookupResult(
        status=_int(response, "status"),
        status_message=_text(response, "statusmsg"),
        uri=_text(response, "uri"),
        categories=_categories(response),
        reputation_index=_int(response, "bcri"),
        all_same_category=_int(response, "a1cat") != 0,
    )


def decode_heartbeat(body: bytes | str) -> HeartBeatResult:
    """Decode a heartbeat response. CDN URIs keep document order."""
    response = _parse_response(body)
    cdn_uris = tuple(
        (uri.text or "").strip() for uri in response.findall("cdnlist/uri")
    )
    return HeartBeatResult(
        status=_int(response, "status"),
        status_message=_text(response, "statusmsg"),
        update_cdn=_bool(response, "updatecdn"),
        update_rtu=_bool(response, "updatertu"),
        update_time=_text(response, "updatetime"),
        cdn_uris=cdn_uris,
    )


def decode_categories(body: bytes | str) -> list[CategoryInfo]:
    """Decode the category list response."""
    response = _parse_response(body)
    return list(_categories(response))


def status_message(body: bytes | str) -> Optional[str]:
    """Best-effort <statusmsg> from an error body, None if unreadable."""
    try:
        response = _parse_response(body)
    except DecodeError:
        return None
    return _text(response, "statusmsg") or None
