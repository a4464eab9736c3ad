"""Tests for config tree models and tree file I/O."""

import json

import pytest
import yaml
from pydantic import ValidationError

from site_migrator.exceptions import TreeValidationError
from site_migrator.tree import ConfigTree, Page, Section, load_tree_file, write_tree_file


# ── Models ──────────────────────────────────────────────────────────


class TestConfigTree:
    def test_camel_case_aliases(self, template_v2):
        tree = ConfigTree.coerce(template_v2)
        blog = tree.find_page("p3")
        assert blog.is_dynamic is True
        assert blog.dynamic_config.collection_type == "articles"
        assert tree.theme.font_size == {"base": "16px", "heading": "32px"}

    def test_snake_case_names_accepted(self):
        page = Page(id="p", is_dynamic=True)
        assert page.is_dynamic is True

    def test_to_dict_round_trips_input(self, template_v2):
        assert ConfigTree.coerce(template_v2).to_dict() == template_v2

    def test_unknown_keys_preserved(self):
        tree = ConfigTree.coerce({
            "pages": [{"id": "p", "layout": "wide", "sections": [{"id": "s", "anim": "fade"}]}],
            "customFlag": 1,
        })
        data = tree.to_dict()
        assert data["customFlag"] == 1
        assert data["pages"][0]["layout"] == "wide"
        assert data["pages"][0]["sections"][0]["anim"] == "fade"

    def test_null_pages_and_sections_read_as_empty(self):
        tree = ConfigTree.coerce({"pages": [{"id": "p", "sections": None}], "navigation": None})
        assert tree.pages[0].sections == []
        assert tree.navigation is None

    def test_absent_navigation_kept_apart_from_empty(self):
        assert ConfigTree.coerce({}).navigation is None
        assert ConfigTree.coerce({"navigation": []}).navigation == []

    def test_is_new_alias(self):
        section = Section.model_validate({"id": "s", "_isNew": True})
        assert section.is_new is True
        assert section.model_dump(by_alias=True)["_isNew"] is True

    def test_empty_id_rejected(self):
        with pytest.raises(TreeValidationError, match="user tree"):
            ConfigTree.coerce({"pages": [{"id": ""}]}, source="user tree")

    def test_validation_error_is_chained(self):
        with pytest.raises(TreeValidationError) as exc_info:
            ConfigTree.coerce({"pages": [{"slug": "x"}]}, source="user tree")
        assert exc_info.value.source == "user tree"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_navigation_requires_href(self):
        with pytest.raises(TreeValidationError):
            ConfigTree.coerce({"navigation": [{"label": "Home"}]})

    def test_coerce_returns_model_unchanged(self, template_v2_tree):
        assert ConfigTree.coerce(template_v2_tree) is template_v2_tree

    def test_find_page_last_match_wins(self):
        tree = ConfigTree.coerce({"pages": [{"id": "a", "title": "one"}, {"id": "a", "title": "two"}]})
        assert tree.find_page("a").title == "two"
        assert tree.find_page("missing") is None
        assert tree.has_page("a") and not tree.has_page("b")

    def test_clone_is_independent(self, template_v2_tree):
        copy = template_v2_tree.clone()
        copy.pages[0].sections[0].props["logoText"] = "CHANGED"
        copy.theme.color["primary"] = "#000"
        assert template_v2_tree.pages[0].sections[0].props["logoText"] == "KIDS"
        assert template_v2_tree.theme.color["primary"] == "#ff6b35"

    def test_color_slots(self, template_v2_tree):
        assert template_v2_tree.theme.color_slots() == ["primary", "secondary", "accent"]


# ── File I/O ────────────────────────────────────────────────────────


class TestTreeFiles:
    def test_load_json(self, tmp_path, template_v1):
        path = tmp_path / "site.json"
        path.write_text(json.dumps(template_v1))
        assert load_tree_file(path).to_dict() == template_v1

    def test_load_yaml(self, tmp_path, template_v1):
        path = tmp_path / "site.yaml"
        path.write_text(yaml.safe_dump(template_v1))
        assert load_tree_file(path).to_dict() == template_v1

    def test_template_document_unwrapped(self, tmp_path, template_v1):
        path = tmp_path / "template.json"
        path.write_text(json.dumps({"id": "school1", "version": "1.0.0", "config": template_v1}))
        assert [p.id for p in load_tree_file(path).pages] == ["p1", "p2"]

    def test_empty_yaml_is_empty_tree(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_tree_file(path).pages == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(TreeValidationError, match="Cannot read"):
            load_tree_file(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(TreeValidationError):
            load_tree_file(path)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(TreeValidationError):
            load_tree_file(path)

    @pytest.mark.parametrize("name", ["out.json", "out.yaml"])
    def test_write_then_load(self, tmp_path, template_v2_tree, name):
        path = write_tree_file(template_v2_tree, tmp_path / name)
        assert load_tree_file(path) == template_v2_tree
