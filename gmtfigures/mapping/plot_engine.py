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
from abc import ABC, abstractmethod

from ..figures import CoastFigure
from ..gmt_defaults import GmtDefaults

logger = logging.getLogger("gmtfigures")


class PlotEngine(ABC):
    """Abstract base class for rendering a figure with GMT.
    Do not use this base class directly. Use subclasses instead, such as :class:`GmtCliPlotEngine` or :class:`PygmtPlotEngine`.

    A figure is rendered in three steps: set the GMT defaults, draw the coastline map into
    the output file, then reset the GMT defaults. The reset step always runs, even if drawing failed.
    """

    @abstractmethod
    def apply_defaults(self, defaults: GmtDefaults) -> int:
        """Set GMT defaults before drawing (abstract method). Return an exit code."""
        pass  # This is an abstract method, no implementation here.

    @abstractmethod
    def plot_coast(self, figure: CoastFigure, output: str) -> int:
        """Draw the coastline map into the output file (abstract method). Return an exit code."""
        pass  # This is an abstract method, no implementation here.

    @abstractmethod
    def reset_defaults(self, defaults: GmtDefaults) -> int:
        """Set GMT defaults after drawing (abstract method). Return an exit code."""
        pass  # This is an abstract method, no implementation here.

    def render(self, figure: CoastFigure, output=None) -> int:
        """Render ``figure`` into ``output`` and return the exit code.

        Parameters
        ----------
        figure : CoastFigure
            the figure to render
        output : str, optional
            output file name, defaults to ``figure.output``

        Returns
        -------
        int
            the exit code of the drawing step if it failed, otherwise the exit code of the reset step
        """
        if output is None:
            output = figure.output

        logger.info(f"Rendering {figure.name} into {output} with {type(self).__name__}.")

        # the steps run unconditionally, one after another, like lines in a shell script
        self.apply_defaults(figure.defaults)
        try:
            plot_code = self.plot_coast(figure, output)
        finally:
            reset_code = self.reset_defaults(figure.reset)

        if plot_code != 0:
            logger.warning(f"Drawing {figure.name} failed with exit code {plot_code}.")
            return plot_code
        return reset_code
