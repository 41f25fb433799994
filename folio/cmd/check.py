"""Data document check command."""

import argparse
import asyncio
import json

from folio.shared import Color, echo
from folio.site import DataSources, load_portfolio


def cmd_check(args: argparse.Namespace) -> int:
    """Load the data documents and report the outcome without rendering."""
    sources = DataSources(args.data, timeout=args.timeout)
    # Keep stdout pure JSON under --json.
    result = asyncio.run(
        load_portfolio(
            sources, verbose=args.verbose and not args.json, report=not args.json
        )
    )

    if args.json:
        output = {"ok": result.ok}
        if result.ok:
            portfolio = result.portfolio
            output["counts"] = {
                "socialMedia": len(portfolio.profile.socialMedia),
                "skills": len(portfolio.profile.skills or []),
                "education": len(portfolio.education),
                "experience": len(portfolio.experience),
                "projects": len(portfolio.projects),
            }
        else:
            output["reason"] = result.reason.value
            output["document"] = result.document
            output["message"] = result.message
        print(json.dumps(output, indent=2))
        return 0 if result.ok else 1

    if not result.ok:
        return 1

    portfolio = result.portfolio
    echo(f"Profile: {portfolio.profile.name}", Color.INFO)
    echo(f"  Education entries: {len(portfolio.education)}", Color.INFO)
    echo(f"  Experience entries: {len(portfolio.experience)}", Color.INFO)
    echo(f"  Projects: {len(portfolio.projects)}", Color.INFO)
    echo("All data documents loaded.", Color.SUCCESS)
    return 0
