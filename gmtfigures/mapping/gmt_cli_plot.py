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
import os
import shlex
import shutil

from ..exceptions import GmtNotFound
from ..figures import CoastFigure
from ..gmt_defaults import GmtDefaults
from ..utils.call_system_command import call_system_command
from .plot_engine import PlotEngine

logger = logging.getLogger("gmtfigures")

DEFAULT_GMT_EXECUTABLE = "gmt"


def get_gmt_executable():
    """return the GMT executable from the GMTFIGURES_GMT environment variable, or "gmt" """
    return os.environ.get("GMTFIGURES_GMT", DEFAULT_GMT_EXECUTABLE)


class GmtCliPlotEngine(PlotEngine):
    """Run the GMT command line programs as subprocesses.

    Exit codes are returned as they are, nothing is translated. GMT's messages go
    straight to stderr.

    Parameters
    ----------
    gmt : str, optional
        the ``gmt`` executable (name or path). Defaults to ``$GMTFIGURES_GMT`` or "gmt".
        Ignored in legacy mode.
    legacy : bool, default=False
        call the GMT 4 stand-alone programs (``gmtset``, ``pscoast``) with GMT 4 parameter
        names instead of ``gmt set`` and ``gmt pscoast``
    cwd : str, optional
        directory to run GMT in, which is where ``gmt.conf`` is written. Defaults to the current directory.
    dry_run : bool, default=False
        log and print the commands instead of running them
    """

    def __init__(self, gmt=None, legacy=False, cwd=None, dry_run=False):
        self.gmt = gmt if gmt else get_gmt_executable()
        self.legacy = legacy
        self.cwd = cwd
        self.dry_run = dry_run

    def command(self, module, *args):
        """Return the full command line for a GMT module, e.g. ``["gmt", "pscoast", ...]``."""
        if self.legacy:
            return [module, *args]
        return [self.gmt, module, *args]

    def set_command(self, defaults: GmtDefaults):
        if self.legacy:
            return self.command("gmtset", *defaults.set_args(legacy=True))
        return self.command("set", *defaults.set_args())

    def pscoast_command(self, figure: CoastFigure):
        return self.command("pscoast", *figure.pscoast_args())

    def apply_defaults(self, defaults: GmtDefaults) -> int:
        # a bare "gmtset" is a usage error, so there is nothing to run without settings
        if len(defaults) == 0:
            return 0
        return self._run(self.set_command(defaults))

    def reset_defaults(self, defaults: GmtDefaults) -> int:
        return self.apply_defaults(defaults)

    def plot_coast(self, figure: CoastFigure, output: str) -> int:
        cmd = self.pscoast_command(figure)
        if self.dry_run:
            return self._run(cmd, output=output)

        path = output if self.cwd is None else os.path.join(self.cwd, output)
        # the file is created (and truncated) before GMT runs, as "> output" would do
        with open(path, "wb") as f:
            return self._run(cmd, stdout=f, output=output)

    def _run(self, cmd, stdout=None, output=None) -> int:
        line = shlex.join(cmd)
        if output:
            line = f"{line} > {shlex.quote(output)}"

        if self.dry_run:
            print(line)
            return 0

        self._check_executable(cmd[0])
        logger.info(line)
        code = call_system_command(
            cmd,
            check_return_code=None,
            stdout=stdout,
            return_code=True,
            cwd=self.cwd,
        )
        logger.info(f"{shlex.join(cmd)} exited with code {code}.")
        return code

    def _check_executable(self, executable):
        if shutil.which(executable) is None:
            logger.error(f"Unable to find the GMT executable: {executable}")
            raise GmtNotFound(executable)
