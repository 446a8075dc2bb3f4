"""CLI entry point — sorts the files of a directory into categories."""
import argparse
import sys

from filesort.report import ORDERS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filesort",
        description="Group the files in a directory by type, based on their extension",
    )
    parser.add_argument("directory", nargs="?", default=None,
                        help="Directory to scan (default: current directory)")
    parser.add_argument("--order", choices=ORDERS, default=None,
                        help="Category order in the report (default: from config, else category)")
    parser.add_argument("--list-categories", dest="list_categories", action="store_true",
                        help="Print the extension table and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug output (skipped entries, timings) to stderr")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    from filesort.config import ConfigError

    try:
        from filesort.commands import get_version, setup_logging
        setup_logging(args.verbose)

        if args.version:
            print(f"filesort {get_version()}")
            return

        if args.list_categories:
            from filesort.report import render_table
            for line in render_table():
                print(line)
            return

        from filesort.commands.scan import ScanError, cmd_scan
        try:
            cmd_scan(args)
        except ScanError as e:
            print(f"filesort: {e}", file=sys.stderr)
            parser.print_usage(sys.stderr)
            sys.exit(1)
    except ConfigError as e:
        print(f"filesort: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        sys.exit(130)


if __name__ == "__main__":
    main()
