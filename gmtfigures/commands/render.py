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

from ..figures import get_figure, list_figures
from ..mapping import PLOT_ENGINES, get_plot_engine

logger = logging.getLogger("gmtfigures")

help_str = "Render a figure with GMT and save it as PostScript."

__description__ = f"""{help_str}

The GMT defaults of the figure are set first, then the map is drawn, then the defaults
are reset. The exit code is GMT's own exit code.

Example usage:
    - gmtfigures render
    - gmtfigures render lambert_conic -o north_america.ps
    - gmtfigures render --legacy
    - gmtfigures render -e pygmt -o north_america.pdf
"""


def add_parser(subparser):
    """add 'render' command line argument parser"""
    render_cmd = subparser.add_parser(
        "render",
        help=help_str,
        add_help=True,
        description=__description__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    render_cmd.set_defaults(func=run_render)
    render_cmd.add_argument(
        "figure",
        type=str,
        nargs="?",
        default="lambert_conic",
        help=f"the figure to render, one of: {', '.join(list_figures())} (default: lambert_conic)",
    )
    render_cmd.add_argument(
        "-o",
        "--output",
        type=str,
        dest="output",
        default=None,
        help="the output file (default: the figure's own file name, e.g. GMT_lambert_conic.ps)",
    )
    render_cmd.add_argument(
        "-e",
        "--engine",
        type=str,
        dest="engine",
        choices=list(PLOT_ENGINES),
        default="cli",
        help="run the GMT command line programs (cli) or use pygmt (default: cli)",
    )
    render_cmd.add_argument(
        "--gmt",
        type=str,
        dest="gmt",
        default=None,
        help="the gmt executable (default: $GMTFIGURES_GMT or gmt)",
    )
    render_cmd.add_argument(
        "--legacy",
        action="store_true",
        help="call the GMT 4 programs gmtset and pscoast directly",
    )
    render_cmd.add_argument(
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="print the commands instead of running them",
    )


def run_render(args):
    """render the figure and return the exit code"""
    figure = get_figure(args.figure)

    if args.engine == "cli":
        engine = get_plot_engine(
            "cli", gmt=args.gmt, legacy=args.legacy, dry_run=args.dry_run
        )
    else:
        if args.legacy or args.dry_run or args.gmt:
            logger.warning(
                "The --gmt, --legacy and --dry-run options only apply to the cli engine. Ignored."
            )
        engine = get_plot_engine(args.engine)

    return engine.render(figure, args.output)
