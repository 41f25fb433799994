"""Portfolio page build command."""

import argparse
from pathlib import Path

from folio.shared import Color, echo
from folio.site import DataSources, Page, start
from folio.site.renderers import CONTAINER_IDS


def _load_page(template: str | None) -> Page:
    if template:
        return Page.from_file(template)
    return Page.default()


def cmd_build(args: argparse.Namespace) -> int:
    """Handle portfolio build."""
    try:
        page = _load_page(args.template)
        missing = page.missing(CONTAINER_IDS)
        if missing:
            echo(f"Template is missing containers: {', '.join(missing)}", Color.ERROR)
            return 1

        sources = DataSources(args.data, timeout=args.timeout)
        app = start(page, sources, reveal=not args.no_reveal, verbose=args.verbose)
        if not app.result.ok:
            return 1

        output = Path(args.output)
        page.write(output)
    except Exception as e:
        echo(f"Build failed: {e}", Color.ERROR)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    portfolio = app.result.portfolio
    if args.verbose:
        echo(f"  Education entries: {len(portfolio.education)}", Color.INFO)
        echo(f"  Experience entries: {len(portfolio.experience)}", Color.INFO)
        echo(f"  Projects: {len(portfolio.projects)}", Color.INFO)
    echo(f"Portfolio page created: {output}", Color.SUCCESS)
    return 0
