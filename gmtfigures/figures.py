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
from typing import List, Sequence

from .exceptions import UnknownFigure
from .gmt_defaults import GmtDefaults


class CoastFigure:
    """A coastline map drawn by GMT's ``pscoast``, together with the GMT defaults
    which are set before and reset after drawing it.

    The values are kept as GMT-style strings and are passed to GMT verbatim.
    Nothing is validated here, GMT reports bad parameters itself.

    Parameters
    ----------
    name : str
        name of the figure in the registry
    output : str
        default output file name (PostScript)
    region : sequence of float
        west, east, south, north
    projection : str
        GMT projection string without the leading ``-J``, e.g. "l-100/35/33/45/1:50000000"
    frame : str
        GMT frame string without the leading ``-B``
    resolution : str
        single-letter GMT coastline resolution (c, l, i, h, f)
    borders : sequence of str
        GMT ``-N`` values, one per boundary type, e.g. ["1/1p", "2/0.5p"]
    area_thresh : int
        minimum feature area in km^2
    land : str
        land fill
    shorelines : str
        shoreline pen
    portrait : bool
        whether to plot in portrait mode (``-P``)
    defaults : GmtDefaults
        GMT defaults to set before drawing
    reset : GmtDefaults
        GMT defaults to set after drawing
    description : str, optional
        one-line description, used by ``gmtfigures list``
    """

    def __init__(
        self,
        name: str,
        output: str,
        region: Sequence[float],
        projection: str,
        frame: str,
        resolution: str = "l",
        borders: Sequence[str] = (),
        area_thresh=None,
        land=None,
        shorelines=None,
        portrait: bool = True,
        defaults: GmtDefaults = None,
        reset: GmtDefaults = None,
        description: str = "",
    ):
        self.name = name
        self.output = output
        self.region = tuple(region)
        self.projection = projection
        self.frame = frame
        self.resolution = resolution
        self.borders = list(borders)
        self.area_thresh = area_thresh
        self.land = land
        self.shorelines = shorelines
        self.portrait = portrait
        self.defaults = defaults if defaults is not None else GmtDefaults()
        self.reset = reset if reset is not None else GmtDefaults()
        self.description = description

    def __repr__(self):
        return f"CoastFigure({self.name!r})"

    @property
    def region_str(self):
        """the region in GMT's "west/east/south/north" form"""
        return "/".join(_format_number(v) for v in self.region)

    def pscoast_args(self) -> List[str]:
        """Return the ``pscoast`` arguments (without the program name) in classic-mode form."""
        args = [
            f"-R{self.region_str}",
            f"-J{self.projection}",
            f"-B{self.frame}",
            f"-D{self.resolution}",
        ]
        args += [f"-N{b}" for b in self.borders]
        if self.area_thresh is not None:
            args.append(f"-A{self.area_thresh}")
        if self.land:
            args.append(f"-G{self.land}")
        if self.shorelines:
            args.append(f"-W{self.shorelines}")
        if self.portrait:
            args.append("-P")
        return args


def _format_number(v):
    # -130.0 -> "-130", 24.5 -> "24.5"
    if float(v).is_integer():
        return str(int(v))
    return str(v)


LAMBERT_CONIC = CoastFigure(
    name="lambert_conic",
    output="GMT_lambert_conic.ps",
    region=(-130, -70, 24, 52),
    projection="l-100/35/33/45/1:50000000",
    frame="10g5",
    resolution="l",
    borders=["1/1p", "2/0.5p"],
    area_thresh=500,
    land="lightgray",
    shorelines="0.25p",
    portrait=True,
    defaults=GmtDefaults(
        BASEMAP_TYPE="FANCY",
        PLOT_DEGREE_FORMAT="ddd:mm:ssF",
        GRID_CROSS_SIZE="0.05i",
    ),
    reset=GmtDefaults(GRID_CROSS_SIZE="0"),
    description="Lambert Conic Conformal projection of North America",
)

_FIGURES = {f.name: f for f in [LAMBERT_CONIC]}


def list_figures() -> List[str]:
    """Return the names of all registered figures."""
    return list(_FIGURES)


def get_figure(name: str) -> CoastFigure:
    """Return the registered figure called ``name``.

    Raises
    ------
    UnknownFigure
        if there is no such figure
    """
    try:
        return _FIGURES[name]
    except KeyError:
        raise UnknownFigure(name, list_figures()) from None
