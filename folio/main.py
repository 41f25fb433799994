import argparse
import sys

from folio.cmd import cmd_build, cmd_check, cmd_scroll


DEFAULT_OUTPUT = "dist/index.html"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build a single-page portfolio site.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    build_parser = subparsers.add_parser("build", help="Render the portfolio page")
    build_parser.add_argument(
        "data", help="Data directory or base URL holding the four documents"
    )
    build_parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Output HTML path (default: {DEFAULT_OUTPUT})",
    )
    build_parser.add_argument("--template", help="HTML shell to render into")
    build_parser.add_argument(
        "--timeout", type=float, help="Timeout in seconds for remote documents"
    )
    build_parser.add_argument(
        "--no-reveal",
        action="store_true",
        help="Do not hide sections for the fade-in animation",
    )
    build_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    check_parser = subparsers.add_parser("check", help="Load and validate the data")
    check_parser.add_argument(
        "data", help="Data directory or base URL holding the four documents"
    )
    check_parser.add_argument(
        "--timeout", type=float, help="Timeout in seconds for remote documents"
    )
    check_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    check_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )

    scroll_parser = subparsers.add_parser(
        "scroll", help="Evaluate navigation highlighting for a scroll offset"
    )
    scroll_parser.add_argument(
        "--offset", type=float, default=0.0, help="Vertical scroll offset"
    )
    scroll_parser.add_argument(
        "--section",
        action="append",
        default=[],
        help="Section geometry as ID:TOP:HEIGHT, repeat in document order",
    )
    scroll_parser.add_argument("--click", help="Nav link href to click instead")
    scroll_parser.add_argument("--template", help="HTML shell providing the nav links")
    scroll_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    scroll_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "build":
        return cmd_build(args)
    elif args.command == "check":
        return cmd_check(args)
    elif args.command == "scroll":
        return cmd_scroll(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
