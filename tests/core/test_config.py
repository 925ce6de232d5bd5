"""Tests for the rendering configuration."""

import pytest

from bibcite.core.config import DEFAULT_PLACEHOLDER, CitationStyle, Config
from bibcite.core.exceptions import ConfigError


class TestConfig:
    """Test defaults and mapping conversion."""

    def test_defaults(self) -> None:
        config = Config()
        assert config.bibliography == "bibliography.bib"
        assert config.style is CitationStyle.AUTHOR_YEAR
        assert config.refs_file is None
        assert config.placeholder == DEFAULT_PLACEHOLDER == "[[_REFS_]]"
        assert config.render_key is True
        assert config.link_refs is True

    def test_from_mapping_kebab_case(self) -> None:
        config = Config.from_mapping(
            {
                "bibliography": "refs.bib",
                "style": "numbered",
                "refs-file": "refs/output.md",
                "placeholder": "<!-- refs -->",
                "render-key": False,
                "link-refs": False,
            }
        )

        assert config.bibliography == "refs.bib"
        assert config.style is CitationStyle.INDEX
        assert config.refs_file == "refs/output.md"
        assert config.placeholder == "<!-- refs -->"
        assert config.render_key is False
        assert config.link_refs is False

    def test_from_empty_mapping(self) -> None:
        assert Config.from_mapping(None) == Config()
        assert Config.from_mapping({}) == Config()

    def test_unknown_keys_are_ignored(self) -> None:
        assert Config.from_mapping({"theme": "dark"}) == Config()

    def test_unknown_style(self) -> None:
        with pytest.raises(ConfigError, match="Unknown citation style 'apa'") as exc:
            Config.from_mapping({"style": "apa"})
        assert exc.value.field == "style"

    def test_empty_placeholder(self) -> None:
        with pytest.raises(ConfigError, match="Placeholder must not be empty") as exc:
            Config.from_mapping({"placeholder": ""})
        assert exc.value.field == "placeholder"

    def test_wrong_type(self) -> None:
        with pytest.raises(ConfigError, match="Invalid configuration"):
            Config.from_mapping({"render-key": "sometimes"})

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Config.from_mapping({"style": "apa"})

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            Config().placeholder = "x"
