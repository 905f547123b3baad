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
import logging

from ..figures import CoastFigure
from ..gmt_defaults import GmtDefaults
from .plot_engine import PlotEngine

logger = logging.getLogger("gmtfigures")

# GMT's single-letter coastline resolutions and the names pygmt uses for them
RESOLUTIONS = {
    "c": "crude",
    "l": "low",
    "i": "intermediate",
    "h": "high",
    "f": "full",
}


def _pygmt():
    # pygmt loads the GMT shared library on import, so only do it when we actually plot
    import pygmt

    return pygmt


class PygmtPlotEngine(PlotEngine):
    """Use pygmt for map plotting

    pygmt works in GMT's modern mode, where figures are always in portrait orientation,
    so ``CoastFigure.portrait`` has no effect here. GMT errors are raised by pygmt as
    ``pygmt.exceptions.GMTCLibError`` and propagate to the caller.
    """

    def __init__(self):
        self.fig = None

    def apply_defaults(self, defaults: GmtDefaults) -> int:
        _pygmt().config(**defaults.as_pygmt_config())
        logger.info(f"pygmt.config({defaults.as_pygmt_config()})")
        return 0

    def reset_defaults(self, defaults: GmtDefaults) -> int:
        return self.apply_defaults(defaults)

    def plot_coast(self, figure: CoastFigure, output: str) -> int:
        """Use pygmt to draw the coastline map and save it to ``output``

        Parameters
        ----------
        figure : CoastFigure
            the figure to draw
        output : str
            the output file, the format is taken from the file extension (e.g. ".ps", ".pdf", ".png")
        """
        self.fig = _pygmt().Figure()
        self.plot_coast_onto(self.fig, figure)
        self.fig.savefig(output)
        logger.info(f"Done! The {output} has been saved.")
        return 0

    def plot_coast_onto(self, fig, figure: CoastFigure):
        """Draw ``figure`` onto an existing ``pygmt.Figure()`` object

        Parameters
        ----------
        fig : pygmt.Figure()
            pygmt Figure object
        figure : CoastFigure
            the coastline map parameters
        """
        kwargs = {}
        if figure.borders:
            kwargs["borders"] = list(figure.borders)
        if figure.area_thresh is not None:
            kwargs["area_thresh"] = figure.area_thresh
        if figure.land:
            kwargs["land"] = figure.land
        if figure.shorelines:
            kwargs["shorelines"] = figure.shorelines

        fig.coast(
            region=list(figure.region),
            projection=figure.projection,
            frame=figure.frame,
            resolution=RESOLUTIONS.get(figure.resolution, figure.resolution),
            **kwargs,
        )
        return fig
