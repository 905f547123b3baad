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
import logging.config
import os

import yaml

DEFAULT_CONFIG_FILE = os.path.join(
    os.path.dirname(os.path.dirname(os.path.realpath(__file__))), "logging_config.yaml"
)


def setup_logging(config_file=DEFAULT_CONFIG_FILE):
    """configure the "gmtfigures" logger from a YAML dictConfig file, then honour GMTFIGURES_DEBUG"""
    if os.path.isfile(config_file):
        with open(config_file, "rt") as f:
            config = yaml.safe_load(f.read())
        logging.config.dictConfig(config)
    if get_debug_level() > 0:
        turn_on_debug_logging()


def turn_on_debug_logging():
    debug_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s [%(module)s:%(filename)s:%(lineno)s]"
    )
    logger = logging.getLogger("gmtfigures")
    logger.setLevel(logging.DEBUG)
    for h in logger.handlers:
        h.setLevel(logging.DEBUG)
        h.setFormatter(debug_formatter)

    logger.debug(f"Debug logging is on (GMTFIGURES_DEBUG={os.environ.get('GMTFIGURES_DEBUG')}).")


def get_debug_level():
    """GMTFIGURES_DEBUG: "true" means 1, otherwise an integer, anything else means 0"""
    value = os.environ.get("GMTFIGURES_DEBUG", "0")
    if value.lower() == "true":
        return 1
    try:
        return int(value)
    except ValueError:
        return 0
