"""What kind of resource a URL-valued attribute points at."""

from enum import StrEnum


class SemanticCategory(StrEnum):
    STYLESHEET = "stylesheet"
    SCRIPT = "script"
    IMAGE = "image"
    HYPERLINK = "hyperlink"
    PREFETCH = "prefetch"
    OTHER_RESOURCE = "other-resource"
    UNDEFINED = "undefined"

    @staticmethod
    def parse(name: str) -> "SemanticCategory":
        """Parse a category name as written in configuration, ignoring case."""
        try:
            return SemanticCategory(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown semantic category: {name!r}") from None
