"""Shared test fixtures for site-migrator."""

import copy
import logging

import pytest

from site_migrator.config.models import MigratorConfig
from site_migrator.tree.models import ConfigTree


def _template_v1() -> dict:
    return {
        "pages": [
            {
                "id": "p1",
                "slug": "index",
                "title": "Home | School1",
                "seo": {"description": "Welcome to our school"},
                "sections": [
                    {
                        "id": "s1",
                        "type": "school1navbar",
                        "props": {
                            "logoText": "KIDS",
                            "links": [
                                {"label": "Home", "href": "./"},
                                {"label": "About Us", "href": "./about"},
                            ],
                        },
                    },
                    {
                        "id": "s2",
                        "type": "school1hero",
                        "props": {"headline": "For Your Child's Bright Future"},
                    },
                ],
            },
            {
                "id": "p2",
                "slug": "about",
                "title": "About | School1",
                "sections": [
                    {"id": "s1", "type": "school1about", "props": {"body": "Since 1990"}},
                ],
            },
        ],
        "theme": {
            "color": {"primary": "#ff6b35", "secondary": "#004e89"},
            "font": "Poppins",
            "fontSize": {"base": "16px", "heading": "32px"},
            "fontWeight": {"normal": 400, "bold": 700},
        },
        "navigation": [
            {"label": "Home", "href": "/"},
            {"label": "About", "href": "/about"},
        ],
        "footer": {"copyright": "School1"},
    }


def _template_v2() -> dict:
    tree = _template_v1()
    # new section on the home page, a new page, new colors, new font, new nav
    tree["pages"][0]["sections"].append(
        {"id": "s3", "type": "school1stats", "props": {"stats": [{"value": "1000+"}]}}
    )
    tree["pages"].append({
        "id": "p3",
        "slug": "blog",
        "title": "Blog | School1",
        "isDynamic": True,
        "dynamicConfig": {"collectionType": "articles"},
        "sections": [{"id": "s1", "type": "articleList", "props": {}}],
    })
    tree["theme"]["color"]["accent"] = "#f7c548"
    tree["theme"]["font"] = "Nunito"
    tree["navigation"].append({"label": "Blog", "href": "/blog"})
    return tree


@pytest.fixture
def template_v1() -> dict:
    return _template_v1()


@pytest.fixture
def template_v2() -> dict:
    return _template_v2()


@pytest.fixture
def user_tree() -> dict:
    """A clone of v1 the user has customised."""
    tree = copy.deepcopy(_template_v1())
    tree["pages"][0]["sections"][1]["props"]["headline"] = "Welcome to Little Stars"
    tree["pages"][0]["sections"].append(
        {"id": "u1", "type": "testimonial", "props": {"quote": "Lovely place"}}
    )
    tree["theme"]["color"]["primary"] = "#111111"
    tree["theme"]["font"] = "Georgia"
    return tree


@pytest.fixture
def template_v2_tree(template_v2) -> ConfigTree:
    return ConfigTree.coerce(template_v2)


@pytest.fixture
def sample_config() -> MigratorConfig:
    return MigratorConfig()


@pytest.fixture
def reset_package_logger():
    """Drop handlers installed by setup_logging so later tests start clean."""
    yield
    logger = logging.getLogger("site_migrator")
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
