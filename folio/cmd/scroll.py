"""Navigation highlight evaluation command."""

import argparse
import json

from folio.shared import Color, echo, parse_section
from folio.site import NavigationController, Page, SectionBox
from folio.site.navigation import smooth_scroll_offsets


def cmd_scroll(args: argparse.Namespace) -> int:
    """Report the active nav links for a scroll offset, or a click's scroll target."""
    try:
        sections = [SectionBox(*parse_section(value)) for value in args.section]
        page = Page.from_file(args.template) if args.template else Page.default()
        controller = NavigationController(page.nav_hrefs())

        if args.click:
            request = controller.on_click(args.click, sections)
            output = {"top": request.top, "behavior": request.behavior}
            if args.verbose:
                output["frames"] = [
                    round(y, 2) for y in smooth_scroll_offsets(args.offset, request.top)
                ]
        else:
            active = controller.on_scroll(args.offset, sections)
            output = {"offset": args.offset, "active": sorted(active)}
    except Exception as e:
        echo(f"Scroll evaluation failed: {e}", Color.ERROR)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    if args.json:
        print(json.dumps(output, indent=2))
    elif args.click:
        echo(f"Scroll to {output['top']:g} ({output['behavior']})", Color.INFO)
        for y in output.get("frames", []):
            echo(f"  {y:g}", Color.INFO)
    elif output["active"]:
        echo(f"Active: {', '.join(output['active'])}", Color.INFO)
    else:
        echo("No active link.", Color.WARNING)
    return 0
