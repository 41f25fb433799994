"""Application start: load, render, then wire navigation and reveal."""

import asyncio
from datetime import date
from typing import Iterable, Optional, Sequence

from folio.site.loader import DataSources, LoadResult, load_portfolio
from folio.site.navigation import NavigationController, ScrollRequest, SectionBox
from folio.site.page import Page
from folio.site.renderers import (
    render_education,
    render_experience,
    render_profile,
    render_projects,
    render_year,
)
from folio.site.reveal import REVEAL_CLASS, RevealAnimator


class PortfolioApp:
    """A started page plus the controllers driven by host events."""

    def __init__(self, page: Page, result: LoadResult):
        self.page = page
        self.result = result
        self.navigation = NavigationController(page.nav_hrefs())
        self.reveal = RevealAnimator()

    def wire(self, reveal: bool = True) -> None:
        if not reveal:
            return
        hidden = self.reveal.observe(self.page.section_ids())
        for section_id, styles in hidden.items():
            section = self.page.section(section_id)
            if section is not None:
                self.page.set_style(section, styles)

    def scroll(self, offset: float, sections: Sequence[SectionBox]) -> set[str]:
        active = self.navigation.on_scroll(offset, sections)
        self.page.set_active_links(active)
        return active

    def click(self, href: str, sections: Sequence[SectionBox]) -> ScrollRequest:
        return self.navigation.on_click(href, sections)

    def intersect(self, entries: Iterable[tuple[str, float]]) -> set[str]:
        newly = self.reveal.on_intersection(entries)
        for section_id in newly:
            section = self.page.section(section_id)
            if section is not None:
                self.page.add_class(section, REVEAL_CLASS)
        return newly


def render_into(page: Page, result: LoadResult, year: Optional[int] = None) -> None:
    """Apply every renderer to the page. Does nothing for a failed load."""
    if not result.ok:
        return

    portfolio = result.portfolio
    page.apply(render_profile(portfolio.profile))
    page.apply(render_education(portfolio.education))
    page.apply(render_experience(portfolio.experience))
    page.apply(render_projects(portfolio.projects))
    page.apply(render_year(year if year is not None else date.today().year))


async def start_async(
    page: Page,
    sources: DataSources,
    reveal: bool = True,
    verbose: bool = False,
) -> PortfolioApp:
    app = PortfolioApp(page, LoadResult(ok=False))
    app.wire(reveal=reveal)

    app.result = await load_portfolio(sources, verbose=verbose)
    render_into(page, app.result)
    return app


def start(
    page: Page,
    sources: DataSources,
    reveal: bool = True,
    verbose: bool = False,
) -> PortfolioApp:
    """Start the page once: the entry point a hosting shell calls."""
    return asyncio.run(start_async(page, sources, reveal=reveal, verbose=verbose))
