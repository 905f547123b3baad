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

from .utils.log_utils import setup_logging
from .utils.version import get_distribution_version

__version__ = get_distribution_version()

setup_logging()
del setup_logging

from .exceptions import GmtNotFound, UnknownFigure, UnknownPlotEngine
from .figures import LAMBERT_CONIC, CoastFigure, get_figure, list_figures
from .gmt_defaults import GmtDefaults
from .mapping import (
    GmtCliPlotEngine,
    PlotEngine,
    PygmtPlotEngine,
    get_plot_engine,
)


def render(name="lambert_conic", output=None, engine="cli", **kwargs):
    """Render a registered figure and return the exit code.

    Parameters
    ----------
    name : str, default="lambert_conic"
        name of the figure, see :func:`list_figures`
    output : str, optional
        output file, defaults to the figure's own file name
    engine : str, default="cli"
        "cli" to run the GMT programs, "pygmt" to use pygmt
    **kwargs
        passed to the plot engine's constructor, e.g. ``gmt="/opt/gmt/bin/gmt"`` or ``legacy=True``

    Returns
    -------
    int
        GMT's exit code
    """
    return get_plot_engine(engine, **kwargs).render(get_figure(name), output)


__all__ = [
    # main classes
    "CoastFigure",
    "GmtDefaults",
    # plot engines
    "PlotEngine",
    "GmtCliPlotEngine",
    "PygmtPlotEngine",
    # functions
    "get_figure",
    "get_plot_engine",
    "list_figures",
    "render",
    # figures
    "LAMBERT_CONIC",
    # exceptions
    "GmtNotFound",
    "UnknownFigure",
    "UnknownPlotEngine",
]
