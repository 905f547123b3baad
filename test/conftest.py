import os
import stat
from pathlib import Path

import pytest

import gmtfigures

## ==========================

# The GMT commands behind the Lambert Conic Conformal figure.
LAMBERT_CONIC_SET_ARGS = [
    "MAP_FRAME_TYPE",
    "fancy",
    "FORMAT_GEO_MAP",
    "ddd:mm:ssF",
    "MAP_GRID_CROSS_SIZE_PRIMARY",
    "0.05i",
]
LAMBERT_CONIC_PSCOAST_ARGS = [
    "-R-130/-70/24/52",
    "-Jl-100/35/33/45/1:50000000",
    "-B10g5",
    "-Dl",
    "-N1/1p",
    "-N2/0.5p",
    "-A500",
    "-Glightgray",
    "-W0.25p",
    "-P",
]
LAMBERT_CONIC_RESET_ARGS = ["MAP_GRID_CROSS_SIZE_PRIMARY", "0"]

FAKE_POSTSCRIPT = "%!PS-Adobe-3.0\n%%EOF\n"

# A stand-in for the gmt executable. It records its arguments, prints a tiny
# PostScript document for the plotting programs and exits with a code taken from
# the environment, so the tests can make any step fail. A "set" before any
# "pscoast" is the first one and takes GMT_STUB_FIRST_SET_EXIT when that is given.
GMT_STUB = """#!/bin/sh
echo "$(basename "$0") $*" >> "$GMT_STUB_LOG"
prog="$(basename "$0")"
if [ "$prog" = "gmt" ]; then
    prog="$1"
fi
case "$prog" in
    pscoast)
        printf '%%!PS-Adobe-3.0\\n%%%%EOF\\n'
        exit ${GMT_STUB_PSCOAST_EXIT:-0}
        ;;
    set|gmtset)
        if [ -n "$GMT_STUB_FIRST_SET_EXIT" ] && ! grep -q pscoast "$GMT_STUB_LOG"; then
            exit "$GMT_STUB_FIRST_SET_EXIT"
        fi
        exit ${GMT_STUB_SET_EXIT:-0}
        ;;
esac
exit 1
"""


class GmtStub:
    def __init__(self, bin_dir: Path, log: Path):
        self.bin_dir = bin_dir
        self.log = log
        self.gmt = str(bin_dir / "gmt")

    def calls(self):
        """return the recorded command lines, one list of words per call"""
        if not self.log.exists():
            return []
        return [line.split() for line in self.log.read_text().splitlines()]


def _write_executable(path: Path, content: str):
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


@pytest.fixture
def gmt_stub(tmp_path, monkeypatch):
    """install stub ``gmt``, ``gmtset`` and ``pscoast`` executables at the front of PATH"""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    for name in ["gmt", "gmtset", "pscoast"]:
        _write_executable(bin_dir / name, GMT_STUB)

    log = tmp_path / "gmt-calls.log"
    monkeypatch.setenv("GMT_STUB_LOG", str(log))
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    monkeypatch.delenv("GMT_STUB_PSCOAST_EXIT", raising=False)
    monkeypatch.delenv("GMT_STUB_SET_EXIT", raising=False)
    monkeypatch.delenv("GMT_STUB_FIRST_SET_EXIT", raising=False)
    monkeypatch.delenv("GMTFIGURES_GMT", raising=False)
    return GmtStub(bin_dir, log)


@pytest.fixture
def work_dir(tmp_path, monkeypatch):
    """run the test in an empty directory, where gmt.conf and the output file end up"""
    d = tmp_path / "work"
    d.mkdir()
    monkeypatch.chdir(d)
    return d


@pytest.fixture(scope="module")
def lambert_conic():
    return gmtfigures.get_figure("lambert_conic")
