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
from typing import Dict, List

# GMT 4 parameter name -> GMT 5+ parameter name
LEGACY_NAMES = {
    "BASEMAP_TYPE": "MAP_FRAME_TYPE",
    "PLOT_DEGREE_FORMAT": "FORMAT_GEO_MAP",
    "GRID_CROSS_SIZE": "MAP_GRID_CROSS_SIZE_PRIMARY",
}
MODERN_NAMES = {v: k for k, v in LEGACY_NAMES.items()}

# GMT 5+ lower-cases these keyword values, GMT 4 upper-cases them
CASE_FOLDED_KEYS = ("MAP_FRAME_TYPE",)


class GmtDefaults:
    """An ordered set of GMT configuration parameters (the things ``gmtset`` writes to ``gmt.conf``).

    Parameters can be given with either GMT 4 names (e.g. ``BASEMAP_TYPE``) or current
    names (e.g. ``MAP_FRAME_TYPE``). They are stored with the current names and translated
    back to the GMT 4 names on request.

    Parameters
    ----------
    settings : dict, optional
        ``{name: value}`` pairs, applied in insertion order.
    **kwargs
        more ``name=value`` pairs, appended after ``settings``.
    """

    def __init__(self, settings=None, **kwargs):
        self._settings: Dict[str, str] = {}
        for key, value in list((settings or {}).items()) + list(kwargs.items()):
            self[key] = value

    def __setitem__(self, key, value):
        key = LEGACY_NAMES.get(key.upper(), key.upper())
        value = str(value)
        if key in CASE_FOLDED_KEYS:
            value = value.lower()
        self._settings[key] = value

    def __getitem__(self, key):
        key = LEGACY_NAMES.get(key.upper(), key.upper())
        return self._settings[key]

    def __contains__(self, key):
        return LEGACY_NAMES.get(key.upper(), key.upper()) in self._settings

    def __iter__(self):
        return iter(self._settings)

    def __len__(self):
        return len(self._settings)

    def __eq__(self, other):
        if not isinstance(other, GmtDefaults):
            return NotImplemented
        return list(self._settings.items()) == list(other._settings.items())

    def __repr__(self):
        return f"GmtDefaults({self._settings!r})"

    def items(self):
        return self._settings.items()

    def set_args(self, legacy=False) -> List[str]:
        """Return the ``KEY VALUE KEY VALUE ...`` arguments for ``gmt set`` (or ``gmtset`` if ``legacy`` is True)."""
        args = []
        for key, value in self._settings.items():
            if legacy:
                if key in CASE_FOLDED_KEYS:
                    value = value.upper()
                key = MODERN_NAMES.get(key, key)
            args += [key, value]
        return args

    def as_pygmt_config(self) -> Dict[str, str]:
        """Return the settings as keyword arguments for ``pygmt.config()``."""
        return dict(self._settings)
