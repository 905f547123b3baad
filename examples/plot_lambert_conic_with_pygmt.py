#!/usr/bin/env python3

import pygmt

from gmtfigures import LAMBERT_CONIC, PygmtPlotEngine

# draw the Lambert Conic Conformal map of North America onto your own pygmt figure,
# then keep plotting on it with pygmt directly

if __name__ == "__main__":
    engine = PygmtPlotEngine()

    with pygmt.config(**LAMBERT_CONIC.defaults.as_pygmt_config()):
        fig = pygmt.Figure()
        engine.plot_coast_onto(fig, LAMBERT_CONIC)

        fig.text(
            text="Lambert Conic Conformal",
            position="TC",
            no_clip=True,
            font="12p,Helvetica,black",
            offset="j0/-0.5c",
        )

    out_f = "lambert-conic-pygmt.pdf"
    fig.savefig(out_f)
    print(f"the file {out_f} has been saved.")
