"""One-way fade-in of page sections as they enter the viewport."""

from typing import Iterable, Sequence


REVEAL_THRESHOLD = 0.1
REVEAL_CLASS = "animate"
HIDDEN_STYLE = {
    "opacity": "0",
    "transform": "translateY(20px)",
    "transition": "all 0.6s ease-out",
}


class RevealAnimator:
    """Latches a section as revealed the first time enough of it is visible.

    The latch only ever closes: a section scrolled back out of view keeps
    its revealed state.
    """

    def __init__(self, threshold: float = REVEAL_THRESHOLD):
        self.threshold = threshold
        self.observed: list[str] = []
        self.revealed: set[str] = set()

    def observe(self, section_ids: Sequence[str]) -> dict[str, dict[str, str]]:
        """Start watching sections; returns the hidden style for each."""
        self.observed = list(section_ids)
        return {section_id: dict(HIDDEN_STYLE) for section_id in self.observed}

    def on_intersection(self, entries: Iterable[tuple[str, float]]) -> set[str]:
        """Handle ``(section_id, visible_ratio)`` entries.

        Returns the sections newly revealed by this batch.
        """
        newly = set()
        for section_id, ratio in entries:
            if section_id not in self.observed:
                continue
            if ratio > 0 and ratio >= self.threshold and section_id not in self.revealed:
                self.revealed.add(section_id)
                newly.add(section_id)
        return newly

    def is_revealed(self, section_id: str) -> bool:
        return section_id in self.revealed
