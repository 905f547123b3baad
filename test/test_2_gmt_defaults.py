from gmtfigures import GmtDefaults

# ========================================= <gmtfigures.GmtDefaults> =====================================


def test_legacy_names_are_translated():
    d = GmtDefaults(BASEMAP_TYPE="FANCY", PLOT_DEGREE_FORMAT="ddd:mm:ssF")
    assert list(d) == ["MAP_FRAME_TYPE", "FORMAT_GEO_MAP"]
    assert d["MAP_FRAME_TYPE"] == "fancy"
    assert d["BASEMAP_TYPE"] == "fancy"
    assert "PLOT_DEGREE_FORMAT" in d
    assert "FORMAT_GEO_MAP" in d


def test_set_args():
    d = GmtDefaults(
        BASEMAP_TYPE="FANCY",
        PLOT_DEGREE_FORMAT="ddd:mm:ssF",
        GRID_CROSS_SIZE="0.05i",
    )
    assert d.set_args() == [
        "MAP_FRAME_TYPE",
        "fancy",
        "FORMAT_GEO_MAP",
        "ddd:mm:ssF",
        "MAP_GRID_CROSS_SIZE_PRIMARY",
        "0.05i",
    ]
    assert d.set_args(legacy=True) == [
        "BASEMAP_TYPE",
        "FANCY",
        "PLOT_DEGREE_FORMAT",
        "ddd:mm:ssF",
        "GRID_CROSS_SIZE",
        "0.05i",
    ]


def test_values_are_kept_verbatim():
    # the degree format is case sensitive and must not be folded
    d = GmtDefaults({"FORMAT_GEO_MAP": "ddd:mm:ssF", "MAP_GRID_CROSS_SIZE_PRIMARY": 0})
    assert d.set_args() == ["FORMAT_GEO_MAP", "ddd:mm:ssF", "MAP_GRID_CROSS_SIZE_PRIMARY", "0"]


def test_unknown_names_pass_through():
    d = GmtDefaults(FONT_ANNOT_PRIMARY="8p")
    assert d.set_args() == ["FONT_ANNOT_PRIMARY", "8p"]
    assert d.set_args(legacy=True) == ["FONT_ANNOT_PRIMARY", "8p"]


def test_later_values_replace_earlier_ones():
    d = GmtDefaults({"GRID_CROSS_SIZE": "0.05i"}, MAP_GRID_CROSS_SIZE_PRIMARY="0")
    assert len(d) == 1
    assert d["GRID_CROSS_SIZE"] == "0"


def test_as_pygmt_config():
    d = GmtDefaults(BASEMAP_TYPE="FANCY", GRID_CROSS_SIZE="0.05i")
    assert d.as_pygmt_config() == {
        "MAP_FRAME_TYPE": "fancy",
        "MAP_GRID_CROSS_SIZE_PRIMARY": "0.05i",
    }
