"""Tests for utility-class generation."""

from krds_forge.themes.utility_classes import (
    color_role_rules,
    component_base_rules,
    generate_utility_css,
    spacing_rules,
)


class TestColorRoleRules:
    def test_light_role_classes(self, sample_tokens) -> None:
        rules = color_role_rules(sample_tokens, "light")
        assert rules == {
            ".krds-light-background-primary-default": {
                "background-color": "var(--krds-light-color-primary-background-default)"
            },
            ".krds-light-text-primary-default": {
                "color": "var(--krds-light-color-primary-text-default)"
            },
        }

    def test_dark_role_classes_only_from_dark_tokens(self, sample_tokens) -> None:
        rules = color_role_rules(sample_tokens, "dark")
        assert set(rules) == {
            ".krds-dark-background-primary-default",
            ".krds-dark-text-primary-default",
        }

    def test_border_role(self) -> None:
        rules = color_role_rules({"krds-light-color-neutral-border-default": "#DEE2E6"}, "light")
        assert rules[".krds-light-border-neutral-default"] == {
            "border-color": "var(--krds-light-color-neutral-border-default)"
        }

    def test_non_role_color_tokens_are_skipped(self) -> None:
        rules = color_role_rules({"krds-light-color-primary-shade-default": "#000"}, "light")
        assert rules == {}


class TestSpacingRules:
    def test_eight_directions_per_token(self) -> None:
        rules = spacing_rules({"krds-spacing-4": "16px"})
        assert list(rules) == [
            ".krds-mt-4",
            ".krds-mr-4",
            ".krds-mb-4",
            ".krds-ml-4",
            ".krds-pt-4",
            ".krds-pr-4",
            ".krds-pb-4",
            ".krds-pl-4",
        ]
        assert rules[".krds-pl-4"] == {"padding-left": "var(--krds-spacing-4)"}

    def test_other_categories_ignored(self, sample_tokens) -> None:
        rules = spacing_rules(sample_tokens)
        assert len(rules) == 8


class TestComponentBaseRules:
    def test_fixed_selectors(self) -> None:
        rules = component_base_rules("light")
        assert list(rules) == [".krds-btn", ".krds-input", ".krds-card"]

    def test_theme_substituted_into_references(self) -> None:
        rules = component_base_rules("dark")
        assert rules[".krds-btn"]["background-color"] == (
            "var(--krds-dark-color-primary-background-default)"
        )


class TestGenerateUtilityCss:
    def test_renders_all_families(self, sample_tokens) -> None:
        css = generate_utility_css(sample_tokens, "light")
        assert ".krds-light-background-primary-default {\n  background-color:" in css
        assert ".krds-mt-4 {\n  margin-top: var(--krds-spacing-4);\n}" in css
        assert ".krds-card {" in css
