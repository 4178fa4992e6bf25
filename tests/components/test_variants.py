"""Tests for component variant analysis."""

import pytest

from design_dna.components.styles import is_transparent, kebab_case, style_value
from design_dna.components.variants import (
    analyze,
    classify_emphasis,
    classify_shape,
    classify_sizes,
)
from design_dna.models import DetectedComponentInstance


class TestStyles:
    def test_kebab_case(self):
        assert kebab_case("paddingTop") == "padding-top"
        assert kebab_case("borderTopLeftRadius") == "border-top-left-radius"
        assert kebab_case("color") == "color"

    def test_style_value_falls_back_to_css_name(self):
        assert style_value({"padding-top": " 8px "}, "paddingTop") == "8px"
        assert style_value({"paddingTop": "4px", "padding-top": "8px"}, "paddingTop") == "4px"
        assert style_value({}, "paddingTop") is None

    @pytest.mark.parametrize(
        "color",
        [None, "", "transparent", "none", "inherit", "rgba(0, 0, 0, 0)", "hsla(0,0%,0%,0.0)",
         "#00000000", "#0000", "hsl(0 0% 0% / 0)"],
    )
    def test_transparent(self, color):
        assert is_transparent(color)

    @pytest.mark.parametrize("color", ["#fff", "#1a73e8", "rgb(0, 0, 0)", "rgba(0, 0, 0, 0.5)", "red", "var(--surface)"])
    def test_visible(self, color):
        assert not is_transparent(color)


class TestSize:
    def test_three_distinct_paddings(self, instance_factory):
        group = [instance_factory(paddingTop=p) for p in ("4px", "8px", "16px")]
        assert classify_sizes(group) == ["small", "medium", "large"]

    def test_two_distinct_paddings_split(self, instance_factory):
        group = [instance_factory(paddingTop=p) for p in ("16px", "4px", "4px")]
        assert classify_sizes(group) == ["large", "small", "small"]

    def test_single_value_is_medium(self, instance_factory):
        group = [instance_factory(paddingTop="12px") for _ in range(4)]
        assert classify_sizes(group) == ["medium"] * 4

    def test_rem_padding_compares_in_pixels(self, instance_factory):
        group = [instance_factory(paddingTop=p) for p in ("0.25rem", "8px", "1rem")]
        assert classify_sizes(group) == ["small", "medium", "large"]

    def test_unparseable_padding_is_medium(self, instance_factory):
        group = [instance_factory(paddingTop="auto"), instance_factory(), instance_factory(paddingTop="4px")]
        assert classify_sizes(group) == ["medium", "medium", "medium"]


class TestEmphasis:
    def test_solid_background_is_primary(self, instance_factory):
        assert classify_emphasis(instance_factory(backgroundColor="#1a73e8")) == "primary"

    def test_outlined_is_secondary(self, instance_factory):
        instance = instance_factory(
            backgroundColor="transparent", borderTopWidth="1px", borderTopColor="#1a73e8"
        )
        assert classify_emphasis(instance) == "secondary"

    def test_border_without_color_is_secondary(self, instance_factory):
        assert classify_emphasis(instance_factory(borderWidth="2px")) == "secondary"

    def test_invisible_border_is_not_secondary(self, instance_factory):
        instance = instance_factory(
            borderTopWidth="1px", borderTopColor="transparent", color="#1a73e8"
        )
        assert classify_emphasis(instance) == "ghost"

    def test_text_only_is_ghost(self, instance_factory):
        instance = instance_factory(
            backgroundColor="rgba(0, 0, 0, 0)", borderTopWidth="0px", color="#1a73e8"
        )
        assert classify_emphasis(instance) == "ghost"

    def test_no_signal_is_tertiary(self, instance_factory):
        assert classify_emphasis(instance_factory()) == "tertiary"

    def test_css_property_names(self):
        instance = DetectedComponentInstance(
            type="button",
            selector="a.btn",
            page_url="/home",
            computed_styles={"background-color": "#000"},
        )
        assert classify_emphasis(instance) == "primary"


class TestShape:
    @pytest.mark.parametrize(
        "styles,expected",
        [
            ({"borderRadius": "9999px", "height": "40px"}, "pill"),
            ({"borderRadius": "20px", "height": "40px"}, "pill"),
            ({"borderRadius": "50%"}, "pill"),
            ({"borderRadius": "10%"}, "rounded"),
            ({"borderRadius": "8px", "height": "40px"}, "rounded"),
            ({"borderRadius": "8px"}, "rounded"),
            ({"borderRadius": "8px 8px 0 0", "height": "40px"}, "rounded"),
            ({"borderRadius": "0px"}, "square"),
            ({"borderRadius": "0"}, "square"),
            ({"borderRadius": "inherit"}, "square"),
            ({}, "square"),
        ],
    )
    def test_shapes(self, instance_factory, styles, expected):
        assert classify_shape(instance_factory(**styles)) == expected


class TestAnalyze:
    def test_one_result_per_instance(self, instance_factory):
        instances = [instance_factory(paddingTop=p) for p in ("4px", "8px", "16px")]
        analyzed = analyze(instances)
        assert [a.instance for a in analyzed] == instances
        assert [a.variant.size for a in analyzed] == ["small", "medium", "large"]

    def test_size_distribution(self, instance_factory):
        analyzed = analyze([instance_factory(paddingTop=p) for p in ("4px", "8px", "16px")])
        size = analyzed[0].dimensions[0]
        assert size.name == "size"
        assert dict(size.distribution) == {"small": 1, "medium": 1, "large": 1}
        assert size.values == ("small", "medium", "large")

    def test_distributions_sum_to_group_size(self, instance_factory):
        analyzed = analyze(
            [instance_factory(backgroundColor="#000", borderRadius="8px") for _ in range(5)]
        )
        for dimension in analyzed[0].dimensions:
            assert sum(dimension.distribution.values()) == 5
        emphasis = analyzed[0].dimensions[1]
        assert emphasis.values == ("primary",)
        assert emphasis.distribution["ghost"] == 0

    def test_distribution_is_read_only(self, instance_factory):
        analyzed = analyze([instance_factory(paddingTop="4px"), instance_factory(paddingTop="8px")])
        size = analyzed[0].dimensions[0]
        with pytest.raises(TypeError):
            size.distribution["small"] = 99
        assert size.distribution["small"] == 1

    def test_groups_do_not_share_distributions(self, instance_factory):
        instances = [
            instance_factory(type="button", paddingTop="4px"),
            instance_factory(type="card", paddingTop="4px"),
        ]
        button, card = (a.dimensions[0].distribution for a in analyze(instances))
        assert button is not card
        assert dict(button) == dict(card) == {"small": 0, "medium": 1, "large": 0}

    def test_types_bucketed_independently(self, instance_factory):
        instances = [
            instance_factory(type="button", paddingTop="4px"),
            instance_factory(type="card", paddingTop="40px"),
            instance_factory(type="button", paddingTop="16px"),
        ]
        analyzed = analyze(instances)
        assert [a.instance.type for a in analyzed] == ["button", "card", "button"]
        assert [a.variant.size for a in analyzed] == ["small", "medium", "large"]
        assert sum(analyzed[1].dimensions[0].distribution.values()) == 1

    def test_empty(self):
        assert analyze([]) == []
