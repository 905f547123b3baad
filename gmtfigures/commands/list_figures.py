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

from ..figures import get_figure, list_figures

help_str = "Show a list of available figures."

__description__ = f"""{help_str}

Example usage:
    - gmtfigures list
    - gmtfigures list -f lambert_conic
"""


def add_parser(subparser):
    """add 'list' command line argument parser"""
    list_cmd = subparser.add_parser(
        "list",
        help=help_str,
        add_help=True,
        description=__description__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    list_cmd.set_defaults(func=run_list_figures)
    list_cmd.add_argument("-f", "--figure", type=str, dest="figure", nargs=1)


def run_list_figures(args):
    if args.figure:
        figure = get_figure(args.figure[0])
        print()
        print(f"Figure name: {figure.name}")
        print(f"Description: {figure.description}")
        print(f"Output: {figure.output}")
        print(f"Defaults: {' '.join(figure.defaults.set_args())}")
        print(f"pscoast {' '.join(figure.pscoast_args())}")
        print(f"Reset: {' '.join(figure.reset.set_args())}")
        print()
    else:
        print()
        print("Figures:")
        for n in list_figures():
            print(f"    {n:<20}{get_figure(n).description}")
        print()
    return 0
