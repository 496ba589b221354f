"""HTML resource attribute scanning."""

from jslexpy.html.element import HtmlAttribute, HtmlElement
from jslexpy.html.options import ScannerOptions, UrlValuedAttribute
from jslexpy.html.resource_tag_scanner import ResourceRef, is_stylesheet_or_alternate, scan_element
from jslexpy.html.semantic_type import SemanticCategory

__all__ = [
    "HtmlAttribute",
    "HtmlElement",
    "ResourceRef",
    "ScannerOptions",
    "SemanticCategory",
    "UrlValuedAttribute",
    "is_stylesheet_or_alternate",
    "scan_element",
]
