"""Find the attribute of an HTML element that references a fetchable resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from jslexpy.html.element import HtmlAttribute, HtmlElement
from jslexpy.html.options import ScannerOptions
from jslexpy.html.semantic_type import SemanticCategory

STYLESHEET: Final[str] = "stylesheet"

# Values of <link rel=...> that mark an image (favicons and the iOS variants).
IMAGE_RELS: Final[frozenset[str]] = frozenset(
    {
        "icon",
        "apple-touch-icon",
        "apple-touch-icon-precomposed",
        "apple-touch-startup-image",
    }
)

# Values of <link rel=...> relevant to DNS / resource prefetch.
PREFETCH_RELS: Final[frozenset[str]] = frozenset({"prefetch", "dns-prefetch"})

INPUT_TYPE_IMAGE: Final[str] = "image"  # <input type="image" src=...>

# element -> (attribute, category); `link` and `input` need extra logic below.
_SIMPLE_RULES: Final[dict[str, tuple[str, SemanticCategory]]] = {
    "script": ("src", SemanticCategory.SCRIPT),
    "img": ("src", SemanticCategory.IMAGE),
    "body": ("background", SemanticCategory.IMAGE),
    "td": ("background", SemanticCategory.IMAGE),
    "th": ("background", SemanticCategory.IMAGE),
    "table": ("background", SemanticCategory.IMAGE),
    "tbody": ("background", SemanticCategory.IMAGE),
    "tfoot": ("background", SemanticCategory.IMAGE),
    "thead": ("background", SemanticCategory.IMAGE),
    "command": ("icon", SemanticCategory.IMAGE),
    "a": ("href", SemanticCategory.HYPERLINK),
    "area": ("href", SemanticCategory.HYPERLINK),
    "form": ("action", SemanticCategory.HYPERLINK),
    "audio": ("src", SemanticCategory.OTHER_RESOURCE),
    "video": ("src", SemanticCategory.OTHER_RESOURCE),
    "source": ("src", SemanticCategory.OTHER_RESOURCE),
    "track": ("src", SemanticCategory.OTHER_RESOURCE),
    "embed": ("src", SemanticCategory.OTHER_RESOURCE),
    "frame": ("src", SemanticCategory.OTHER_RESOURCE),
    "iframe": ("src", SemanticCategory.OTHER_RESOURCE),
    "html": ("manifest", SemanticCategory.OTHER_RESOURCE),
    "blockquote": ("cite", SemanticCategory.HYPERLINK),
    "q": ("cite", SemanticCategory.HYPERLINK),
    "ins": ("cite", SemanticCategory.HYPERLINK),
    "del": ("cite", SemanticCategory.HYPERLINK),
    "button": ("formaction", SemanticCategory.HYPERLINK),
}


@dataclass(frozen=True, slots=True)
class ResourceRef:
    attribute: HtmlAttribute
    category: SemanticCategory


def is_stylesheet_or_alternate(rel: str | None) -> bool:
    """True for `rel="stylesheet"` and `rel="alternate stylesheet"`."""
    if rel is None:
        return False
    return any(value.lower() == STYLESHEET for value in rel.split())


def _link_category(element: HtmlElement) -> SemanticCategory:
    rel = element.find_attribute("rel")
    if rel is None:
        return SemanticCategory.HYPERLINK
    rel_value = rel.decoded_value_or_none
    if is_stylesheet_or_alternate(rel_value):
        return SemanticCategory.STYLESHEET

    # Unknown rel keywords are skipped, e.g. "shortcut" in "shortcut icon".
    category = SemanticCategory.HYPERLINK
    for value in (rel_value or "").split():
        lowered = value.lower()
        if lowered in IMAGE_RELS:
            return SemanticCategory.IMAGE  # image wins over prefetch
        if lowered in PREFETCH_RELS:
            category = SemanticCategory.PREFETCH
    return category


def _is_attribute_invalid(attribute: HtmlAttribute | None) -> bool:
    return attribute is None or attribute.decoding_error


def _builtin_attribute(element: HtmlElement) -> tuple[HtmlAttribute | None, SemanticCategory]:
    keyword = element.keyword
    if keyword == "link":
        # https://html.spec.whatwg.org/multipage/links.html#linkTypes
        return element.find_attribute("href"), _link_category(element)
    if keyword == "input":
        if (element.attribute_value("type") or "").lower() == INPUT_TYPE_IMAGE:
            return element.find_attribute("src"), SemanticCategory.IMAGE
        return None, SemanticCategory.UNDEFINED
    rule = _SIMPLE_RULES.get(keyword)
    if rule is None:
        return None, SemanticCategory.UNDEFINED
    attribute_name, category = rule
    return element.find_attribute(attribute_name), category


def _extension_attribute(element: HtmlElement, options: ScannerOptions) -> ResourceRef | None:
    for rule in options.url_valued_attributes:
        if rule.element.lower() != element.keyword:
            continue
        lowered = rule.attribute.lower()
        for attribute in element.attributes:
            if attribute.name.lower() == lowered and not attribute.decoding_error:
                return ResourceRef(attribute=attribute, category=rule.category)
    return None


def scan_element(element: HtmlElement, options: ScannerOptions | None = None) -> ResourceRef | None:
    """Return the URL-valued attribute of `element` and what it points at.

    Built-in knowledge comes first; `options` extends it for elements or
    attributes the table does not cover. Returns None when nothing usable is
    found.
    """
    if not element.attributes:
        return None

    attribute, category = _builtin_attribute(element)
    if _is_attribute_invalid(attribute) and options is not None:
        extension = _extension_attribute(element, options)
        if extension is not None:
            return extension

    if _is_attribute_invalid(attribute) or category == SemanticCategory.UNDEFINED:
        return None
    return ResourceRef(attribute=attribute, category=category)
