# tablemap/tools/ssv_cli.py
#
# Implements the command-line interface for `tablemap-ssv`, a small tool to
# inspect and reshape SSV files from the terminal.

import argparse
import json
import logging
import sys

from .. import config, profiler
from ..errors import TableMapError
from ..formatting import to_python
from ..table.facade import TableMap

logger = logging.getLogger(__name__)


def _load(path, args):
    return TableMap.load_ssv(path, strict=args.strict or None)


def cmd_cat(args):
    table = _load(args.path, args)
    if args.json:
        for entry in table.extract_json().entries():
            row = {key: to_python(value) for key, value in entry.iter()}
            print(json.dumps(row, ensure_ascii=False))
    else:
        sys.stdout.write(str(table))
    return 0


def cmd_clean(args):
    table = _load(args.input, args)
    removed_columns, removed_rows = table.cleanup()
    table.save_ssv(args.output)
    print(f"Removed {removed_columns} empty column(s) and {removed_rows} empty row(s); {len(table)} row(s) left.")
    return 0


def cmd_concat(args):
    result = TableMap()
    for path in args.inputs:
        result.concatenate(_load(path, args))
    result.save_ssv(args.output)
    print(f"Wrote {len(result)} row(s) from {len(args.inputs)} file(s) to {args.output}.")
    return 0


def cmd_filter(args):
    table = _load(args.input, args)
    # Walk backwards so removals do not shift rows still to be visited.
    for index in range(len(table) - 1, -1, -1):
        matches = table.entry(index).get(args.key) == args.value
        if matches == args.exclude:
            table.remove_entry(index)
    table.save_ssv(args.output)
    print(f"Kept {len(table)} row(s).")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="tablemap-ssv",
        description="Inspect and reshape semicolon separated value (SSV) tables."
    )
    parser.add_argument("--profile", action="store_true", help="Print a load/save timing report.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    parser.add_argument("--strict", action="store_true", help="Reject rows with fewer fields than the header.")
    commands = parser.add_subparsers(dest="command", required=True)

    cat = commands.add_parser("cat", help="Print a table.")
    cat.add_argument("path")
    cat.add_argument("--json", action="store_true", help="Print each row as a JSON object of decoded cells.")
    cat.set_defaults(func=cmd_cat)

    clean = commands.add_parser("clean", help="Drop empty columns and rows.")
    clean.add_argument("input")
    clean.add_argument("output")
    clean.set_defaults(func=cmd_clean)

    concat = commands.add_parser("concat", help="Concatenate tables in order.")
    concat.add_argument("output")
    concat.add_argument("inputs", nargs="+")
    concat.set_defaults(func=cmd_concat)

    filter_ = commands.add_parser("filter", help="Keep rows whose cell equals a value.")
    filter_.add_argument("input")
    filter_.add_argument("output")
    filter_.add_argument("--key", required=True)
    filter_.add_argument("--value", required=True)
    filter_.add_argument("--exclude", action="store_true", help="Keep the rows that do NOT match instead.")
    filter_.set_defaults(func=cmd_filter)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = config.load_settings()
    except ValueError as exc:
        parser.error(str(exc))
    level = logging.DEBUG if args.verbose else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.profile:
            with profiler.profile() as p:
                status = args.func(args)
            print("\n" + "=" * 50)
            p.print_report()
            print("=" * 50)
        else:
            status = args.func(args)
    except (OSError, UnicodeDecodeError, TableMapError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"tablemap-ssv: error: {exc}", file=sys.stderr)
        return 1
    return status


if __name__ == "__main__":
    sys.exit(main())
