"""Portfolio page building.

Loads the profile, education, experience and projects documents, renders
them into an HTML page and models the page's scroll navigation and
section reveal behaviour.
"""

from folio.site.app import PortfolioApp, start, start_async
from folio.site.loader import DataSources, LoadResult, load_portfolio
from folio.site.navigation import NavigationController, SectionBox
from folio.site.page import Page
from folio.site.reveal import RevealAnimator

__all__ = [
    "DataSources",
    "LoadResult",
    "NavigationController",
    "Page",
    "PortfolioApp",
    "RevealAnimator",
    "SectionBox",
    "load_portfolio",
    "start",
    "start_async",
]
