#
#    Copyright (C) 2024-2025 The University of Sydney, Australia
#
#    This program is free software; you can redistribute it and/or modify it under
#    the terms of the GNU General Public License, version 2, as published by
#    the Free Software Foundation.
#
#    This program is distributed in the hope that it will be useful, but WITHOUT
#    ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
#    FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
#    for more details.
#
#    You should have received a copy of the GNU General Public License along
#    with this program; if not, write to Free Software Foundation, Inc.,
#    51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
#
import argparse
import logging
import sys

from gmtfigures import __version__

from .commands import list_figures, render
from .exceptions import GmtNotFound, UnknownFigure

logger = logging.getLogger("gmtfigures")

# what a shell returns when it cannot find a command
COMMAND_NOT_FOUND = 127


class ArgParser(argparse.ArgumentParser):
    def error(self, message):
        sys.stderr.write(f"error: {message}\n")
        self.print_help()
        sys.exit(1)


def get_parser():
    parser = ArgParser(prog="gmtfigures")

    parser.add_argument("-v", "--version", action="store_true")

    # sub-commands
    subparser = parser.add_subparsers(
        dest="command",
        title="subcommands",
        description="valid subcommands",
    )
    # add "list" sub-command
    list_figures.add_parser(subparser)

    # add "render" sub-command
    render.add_parser(subparser)

    return parser


def main(argv=None):
    """run the gmtfigures command line and return the exit code"""
    parser = get_parser()

    if argv is None:
        argv = sys.argv[1:]
    if len(argv) == 0:
        parser.print_help(sys.stderr)
        return 1

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if args.command is None:
        parser.print_help(sys.stderr)
        return 1

    try:
        return args.func(args)
    except GmtNotFound as e:
        logger.error(e)
        return COMMAND_NOT_FOUND
    except UnknownFigure as e:
        logger.error(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
