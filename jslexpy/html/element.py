"""Minimal HTML element model consumed by the resource tag scanner."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HtmlAttribute:
    """A parsed attribute.

    `value` is None for valueless attributes (`<script async>`).
    `decoding_error` marks values whose entities could not be decoded; such
    attributes are never rewritten.
    """

    name: str
    value: str | None = None
    decoding_error: bool = False

    @property
    def decoded_value_or_none(self) -> str | None:
        if self.decoding_error:
            return None
        return self.value


@dataclass(frozen=True, slots=True)
class HtmlElement:
    name: str
    attributes: tuple[HtmlAttribute, ...] = ()

    @property
    def keyword(self) -> str:
        return self.name.lower()

    def find_attribute(self, name: str) -> HtmlAttribute | None:
        """First attribute with this name, case-insensitively."""
        lowered = name.lower()
        for attribute in self.attributes:
            if attribute.name.lower() == lowered:
                return attribute
        return None

    def attribute_value(self, name: str) -> str | None:
        attribute = self.find_attribute(name)
        if attribute is None:
            return None
        return attribute.decoded_value_or_none
