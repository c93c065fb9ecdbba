import pytest

from svginline.errors import OptimizerError
from svginline.optimizer import DEFAULT_CONFIG, merge_config, optimize_svg

SKETCH_EXPORT = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
    "<!-- Generator: Sketch -->\n"
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10" class="">\n'
    "  <title>Logo</title>\n"
    "  <desc>Created with Sketch.</desc>\n"
    "  <metadata><rdf:RDF/></metadata>\n"
    '  <path d="M0 0h10v10H0z"/>\n'
    "</svg>\n"
)


def test_merge_config_prefers_user_values_without_touching_defaults():
    before = dict(DEFAULT_CONFIG)

    merged = merge_config({"removeTitle": True, "collapseWhitespace": False, "custom": {"a": 1}})

    assert merged["removeTitle"] is True
    assert merged["collapseWhitespace"] is False
    assert merged["custom"] == {"a": 1}
    assert merged["removeComments"] is DEFAULT_CONFIG["removeComments"]
    assert dict(DEFAULT_CONFIG) == before
    assert merge_config(None) == before


def test_default_passes():
    result = optimize_svg(SKETCH_EXPORT, merge_config())

    assert result == (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
        "<title>Logo</title>"
        '<path d="M0 0h10v10H0z"/>'
        "</svg>"
    )


def test_remove_title_when_enabled():
    result = optimize_svg(SKETCH_EXPORT, merge_config({"removeTitle": True}))

    assert "<title>" not in result


def test_disabled_passes_leave_text_untouched():
    config = {name: False for name in DEFAULT_CONFIG}

    assert optimize_svg(SKETCH_EXPORT, config) == SKETCH_EXPORT


def test_licence_and_preserved_comments_survive():
    svg = "<!-- Copyright 2020 ACME --><svg><!--! keep --><!-- drop --></svg>"

    result = optimize_svg(svg, merge_config())

    assert result == "<!-- Copyright 2020 ACME --><svg><!--! keep --></svg>"


def test_unknown_options_are_ignored():
    svg = '<svg viewBox="0 0 1 1"></svg>'

    assert optimize_svg(svg, merge_config({"cleanupIDs": {"minify": True}})) == svg


def test_missing_svg_root_is_rejected():
    with pytest.raises(OptimizerError):
        optimize_svg("<html><body></body></html>", merge_config())


def test_whitespace_inside_text_elements_is_kept():
    svg = "<svg>\n  <text><tspan>Hello</tspan> <tspan>world</tspan></text>\n  <g>\n  </g>\n</svg>"

    result = optimize_svg(svg, merge_config())

    assert result == "<svg><text><tspan>Hello</tspan> <tspan>world</tspan></text><g></g></svg>"
