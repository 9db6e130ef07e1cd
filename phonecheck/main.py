"""CLI entry point for PhoneCheck."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from phonecheck.core.app import build_app
from phonecheck.core.countries import COUNTRIES, get_country
from phonecheck.core.state import Panel
from phonecheck.utils.config_loader import load_settings
from phonecheck.utils.logger import setup_logger_from_settings


def resolve_prefix(country: str) -> str:
    """Accept an ISO code (``IN``) or a dialing prefix (``+91``).

    Returns:
        The dialing prefix, or an empty string when nothing matches.
    """
    country = (country or "").strip()
    if country.startswith("+"):
        return country if any(c.dialing_prefix == country for c in COUNTRIES) else ""
    entry = get_country(country) if country else None
    return entry.dialing_prefix if entry else ""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="PhoneCheck - validate a phone number with AbstractAPI Phone Validation"
    )
    parser.add_argument("number", nargs="?", default="", help="Phone number without country code")
    parser.add_argument(
        "--country",
        "-c",
        default="",
        help="Country ISO code (US, GB, IN, ...) or dialing prefix (+44)",
    )
    parser.add_argument(
        "--list-countries",
        action="store_true",
        help="Print the supported countries and exit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override logging level from config/phonecheck.yaml",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    settings = load_settings()
    logger = setup_logger_from_settings(settings, log_level=args.log_level)

    if args.list_countries:
        for country in COUNTRIES:
            print(f"{country.iso_code}  {country.option_label}")
        return 0

    prefix = resolve_prefix(args.country)
    if args.country and not prefix:
        logger.warning(f"Unknown country: {args.country}")

    app = build_app(settings)
    app.dispatch("select_country", prefix=prefix)
    app.dispatch("enter_number", text=args.number)
    app.dispatch("submit")

    notice = app.pop_notice()
    if app.state.active_panel is not Panel.RESULTS:
        print(notice, file=sys.stderr)
        return 1

    width = max(len(row.label) for row in app.state.rows)
    for row in app.state.rows:
        print(f"{row.label:<{width}}  {row.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
