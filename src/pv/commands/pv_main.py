#!/usr/bin/env python3
"""
pv - Print packaging version fields (RPM, Debian, tar/zip) for an upstream version
"""

import argparse
import sys
from typing import List, Optional

from pv._version import __version__
from pv.core.config import (
    load_config, get_bool, get_path, get_rc_style, get_config,
    ConfigError, setup_logging, get_logger, is_verbose_enabled
)
from pv.core.shared import colorize, error_exit, format_variables, OUTPUT_FORMATS
from pv.core.version import ParseError, VARIABLES, RC_STYLES, parse_version

logger = get_logger(__name__)


class PvArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1"""

    def error(self, message):
        self.print_usage(sys.stdout)
        error_exit(message, 1)


def build_parser() -> argparse.ArgumentParser:
    parser = PvArgumentParser(
        prog='pv',
        description='Derive RPM, Debian and archive version strings from an upstream version',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Print every variable:
    %(prog)s v1.14.4-rc1

  Print a single variable:
    %(prog)s 1.15.0~d14b18f1 DEB_FULL_VERSION

  Load every variable into the current shell:
    eval "$(%(prog)s --export 1.14.4)"

Variables:
  """ + '\n  '.join(VARIABLES) + """

Environment:
  PV_RC_STYLE   default for --rc-style (numbered or simple)
  PV_VERBOSE    enable debug logging when true
  PV_LOG_FILE   also write logs to this file
"""
    )
    parser.add_argument('version_string', metavar='version',
                        help="Upstream version: 'nightly', 1.2.3, v1.2.3, 1.2.3-rc1 or 1.2.3~<hash>")
    parser.add_argument('variable', nargs='?',
                        help='Print only this variable (e.g. RPM_FULL_VERSION)')
    parser.add_argument('--rc-style', choices=RC_STYLES, default=None,
                        help='RPM release rule for release candidates: numbered gives 0.N, simple gives 0 '
                             '(default: PV_RC_STYLE or numbered)')
    parser.add_argument('--format', dest='output_format', choices=OUTPUT_FORMATS, default='env',
                        help='Output format when printing every variable (default: env)')
    parser.add_argument('--export', action='store_true',
                        help="Prefix env lines with 'export '")
    parser.add_argument('--verbose', '-v', action='store_true', default=None,
                        help='Enable debug logging')
    parser.add_argument('--log-file', default=None,
                        help='Also write logs to this file (default: PV_LOG_FILE)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        load_config()
        verbose = args.verbose if args.verbose is not None else get_bool('PV_VERBOSE')
        log_file = args.log_file or get_path('PV_LOG_FILE')
        setup_logging(verbose=verbose, log_file=str(log_file) if log_file else None)
        if is_verbose_enabled():
            get_config().print_config()
        rc_style = args.rc_style or get_rc_style()
    except ConfigError as e:
        print(colorize(f"Configuration error: {e}", 'RED'))
        return 1
    except OSError as e:
        print(colorize(f"Error: cannot open log file: {e}", 'RED'))
        return 1

    try:
        version = parse_version(args.version_string, rc_style=rc_style)
    except ParseError as e:
        print(colorize(f"Error: {e}", 'RED'))
        return 1

    if args.variable:
        logger.debug(f"Printing {args.variable} (rc style: {rc_style})")
        try:
            value = version.get_variable(args.variable)
        except KeyError:
            print(colorize(f"Error: unknown variable: {args.variable}", 'RED'))
            print(f"Valid variables: {', '.join(VARIABLES)}")
            return 1
        print(value)
        return 0

    logger.debug(f"Printing all variables as {args.output_format} (rc style: {rc_style})")
    print(format_variables(version.variables(), args.output_format, export=args.export))
    return 0


if __name__ == '__main__':
    sys.exit(main())
