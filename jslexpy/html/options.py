"""Resource scanner configuration."""

from dataclasses import dataclass

from jslexpy.html.semantic_type import SemanticCategory


@dataclass(frozen=True, slots=True)
class UrlValuedAttribute:
    """Extra (element, attribute) pair known to hold a URL of some category."""

    element: str
    attribute: str
    category: SemanticCategory


@dataclass(frozen=True, slots=True)
class ScannerOptions:
    """Site-specific extensions to the built-in URL-valued attribute table.

    Rules are consulted in order, only when the built-in table yields no usable
    attribute.
    """

    url_valued_attributes: tuple[UrlValuedAttribute, ...] = ()

    def with_url_valued_attribute(
        self,
        element: str,
        attribute: str,
        category: SemanticCategory | str,
    ) -> "ScannerOptions":
        if isinstance(category, str) and not isinstance(category, SemanticCategory):
            category = SemanticCategory.parse(category)
        rule = UrlValuedAttribute(element=element, attribute=attribute, category=category)
        return ScannerOptions(url_valued_attributes=(*self.url_valued_attributes, rule))
