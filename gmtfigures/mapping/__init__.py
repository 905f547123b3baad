# This submodule contains the plot engines which turn a figure definition into a map.
# The PlotEngine abstract base class is defined in plot_engine.py.
# There are different PlotEngine subclasses, GmtCliPlotEngine and PygmtPlotEngine, for the GMT
# command line programs and for PyGMT.
# pygmt is only imported when a PygmtPlotEngine actually plots, because importing it needs the GMT library.

from ..exceptions import UnknownPlotEngine
from .gmt_cli_plot import GmtCliPlotEngine
from .plot_engine import PlotEngine
from .pygmt_plot import PygmtPlotEngine

PLOT_ENGINES = {
    "cli": GmtCliPlotEngine,
    "pygmt": PygmtPlotEngine,
}


def get_plot_engine(name="cli", **kwargs) -> PlotEngine:
    """Return a new plot engine by name ("cli" or "pygmt"). ``kwargs`` go to the engine's constructor."""
    try:
        cls = PLOT_ENGINES[name]
    except KeyError:
        raise UnknownPlotEngine(name, list(PLOT_ENGINES)) from None
    return cls(**kwargs)


__all__ = [
    "GmtCliPlotEngine",
    "PlotEngine",
    "PygmtPlotEngine",
    "get_plot_engine",
]
