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


class GmtNotFound(Exception):
    """raise this exception when the GMT executable cannot be found or started."""

    def __init__(self, executable):
        self.executable = executable
        super().__init__(
            f"Unable to run the GMT executable '{executable}'. Install GMT, or set the GMTFIGURES_GMT environment variable (or the --gmt option) to the path of the executable."
        )


class UnknownFigure(Exception):
    """raise this exception when a figure name is not in the registry."""

    def __init__(self, name, available=()):
        self.name = name
        super().__init__(
            f"Unknown figure '{name}'. Available figures: {', '.join(available)}."
        )


class UnknownPlotEngine(Exception):
    """raise this exception when a plot engine name is not recognised."""

    def __init__(self, name, available=()):
        self.name = name
        super().__init__(
            f"Unknown plot engine '{name}'. Available plot engines: {', '.join(available)}."
        )
