"""CLI Argument Parsing"""

import argparse
import argcomplete

from subchangelog import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='subchangelog',
        description='Generate a changelog from the latest commit and moved git submodules',
        epilog='Example: subchangelog -o release_notes (sets the release_notes step output)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Sources
    parser.add_argument('-C', '--repo', type=str, metavar='PATH', help='Run against the working tree at PATH')
    parser.add_argument('--gitmodules', type=str, metavar='PATH', help='Submodule config file (default: .gitmodules)')
    parser.add_argument('--no-submodules', action='store_true', help='Only use the latest top-level commit')

    # Output options
    parser.add_argument('-o', '--output-name', type=str, metavar='NAME', help='CI output variable name (default: changelog)')
    parser.add_argument('--verbose', action='store_true', help='Show each submodule and its revisions')

    # Config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
