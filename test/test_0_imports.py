import pytest

## ==========================


def test_yaml_import():
    import yaml


def test_gmtfigures_modules():
    import gmtfigures
    from gmtfigures import exceptions, figures, gmt_defaults, mapping
    from gmtfigures.mapping import gmt_cli_plot, plot_engine, pygmt_plot
    from gmtfigures.utils import call_system_command, log_utils


def test_version():
    import gmtfigures

    assert isinstance(gmtfigures.__version__, str)
