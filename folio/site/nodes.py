"""Declarative element trees and the page operations renderers emit."""

from dataclasses import dataclass, field
from typing import Union


@dataclass
class Element:
    """One element: tag, attributes and children (elements or text)."""

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Union["Element", str]] = field(default_factory=list)

    def find_all(self, tag: str) -> list["Element"]:
        """All descendants with the given tag, in document order."""
        found = []
        for child in self.children:
            if isinstance(child, Element):
                if child.tag == tag:
                    found.append(child)
                found.extend(child.find_all(tag))
        return found

    def text(self) -> str:
        return "".join(
            c.text() if isinstance(c, Element) else c for c in self.children
        )


def el(tag: str, attrs: dict[str, str] | None = None, *children) -> Element:
    """Build an element, dropping ``None`` children so optional parts vanish."""
    return Element(tag, dict(attrs or {}), [c for c in children if c is not None])


def icon(css_class: str) -> Element:
    return el("i", {"class": css_class})


@dataclass
class SetText:
    target: str
    text: str


@dataclass
class SetAttrs:
    target: str
    attrs: dict[str, str]


@dataclass
class SetIcon:
    """Replace the class of the target's ``<i>`` child."""

    target: str
    icon_class: str


@dataclass
class Append:
    target: str
    element: Element


@dataclass
class Move:
    """Re-parent ``source`` as the last child of ``target``."""

    source: str
    target: str


Operation = Union[SetText, SetAttrs, SetIcon, Append, Move]
