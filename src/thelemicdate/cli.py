"""CLI entry point.

    tdate                                   # now, default location
    tdate -l "London, UK"                   # now, given location
    tdate 1904 3 20 12 0 "Greenwich"        # explicit local date/time
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from thelemicdate import __version__
from thelemicdate.compute import run
from thelemicdate.config import Settings
from thelemicdate.errors import NumericParseError, ThelemicDateError
from thelemicdate.liber_oz import LIBER_OZ
from thelemicdate.models import ExplicitInput, NowInput

logger = logging.getLogger(__name__)

VERSION_BANNER = f"""%(prog)s {__version__}
93 93/93
Do what thou wilt shall be the whole of the Law.
Love is the law, love under will.

Thanks to Lilith Vala Xara for the original implementation
and JSKitty for the Rust port."""

_FIELDS = ("year", "month", "day", "hour", "minute")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tdate",
        description="Displays the current Thelemic date",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "-l",
        "--location",
        help='location for date calculation (e.g. "Las Vegas, NV")',
    )
    p.add_argument(
        "datetime",
        nargs="*",
        metavar="YEAR MONTH DAY HOUR MINUTE LOCATION",
        help="explicit local date and time, then location",
    )
    p.add_argument("--oz", action="store_true", help=argparse.SUPPRESS)
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    p.add_argument("--version", action="version", version=VERSION_BANNER)
    return p


def parse_explicit(fields: list[str]) -> ExplicitInput:
    """Parse the five numeric positionals.

    Raises:
        NumericParseError: A field is not an integer.
    """
    values = []
    for name, raw in zip(_FIELDS, fields):
        try:
            values.append(int(raw))
        except ValueError as exc:
            raise NumericParseError(f"Invalid {name}: {raw!r}") from exc
    return ExplicitInput(*values)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    # --oz wins over everything else on the command line
    if "--oz" in argv:
        print(LIBER_OZ)
        return 0

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.datetime and len(args.datetime) != 6:
        parser.error("expected 6 arguments for datetime (year month day hour minute location)")

    load_dotenv()
    try:
        settings = Settings.from_env()
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.log_level,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        if args.datetime:
            calendar_input = parse_explicit(args.datetime[:5])
            location = args.datetime[5]
        else:
            calendar_input = NowInput()
            location = args.location or settings.default_location
        logger.debug("input=%r location=%r", calendar_input, location)
        line = run(calendar_input, location, settings=settings)
    except ThelemicDateError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
