"""Scroll-driven navigation highlighting and smooth scrolling."""

from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True)
class SectionBox:
    """Geometry of one page section, in document order."""

    id: str
    top: float
    height: float

    @property
    def threshold(self) -> float:
        return self.top - self.height / 3


@dataclass(frozen=True)
class ScrollRequest:
    top: float
    behavior: str = "smooth"


def active_section(sections: Sequence[SectionBox], offset: float) -> str:
    """Id of the last section whose threshold the offset has passed."""
    current = ""
    for section in sections:
        if offset >= section.threshold:
            current = section.id
    return current


class NavigationController:
    """Keeps the sidebar links' active state in step with the scroll offset.

    Nothing is stored between events: every scroll rescans all sections.
    """

    def __init__(self, links: Sequence[str]):
        self.links = list(links)
        self.active: set[str] = set()

    def on_scroll(self, offset: float, sections: Sequence[SectionBox]) -> set[str]:
        current = active_section(sections, offset)
        # An empty id is contained in every href, so all links light up
        # until some section qualifies.
        self.active = {href for href in self.links if current in href}
        return self.active

    def on_click(self, href: str, sections: Sequence[SectionBox]) -> ScrollRequest:
        """Scroll request replacing the default jump to ``href``."""
        target_id = href.split("#", 1)[-1]
        for section in sections:
            if section.id == target_id:
                return ScrollRequest(top=section.top)
        raise LookupError(f"No section for link: {href}")


def _ease_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def smooth_scroll_offsets(
    start: float,
    target: float,
    duration: float = 0.5,
    frame: float = 1 / 60,
) -> Iterator[float]:
    """Offsets of a time-based smooth scroll, one per frame, ending on target."""
    if duration <= 0 or frame <= 0:
        yield target
        return

    steps = max(1, round(duration / frame))
    for step in range(1, steps + 1):
        t = step / steps
        yield start + (target - start) * _ease_in_out(t)
