"""Tests for RenderConfig and the ContextVar-based active configuration."""

from __future__ import annotations

from threading import Thread

import pytest

from marktoc.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from marktoc.errors import ConfigError, MarktocError


class TestRenderConfigDataclass:
    """RenderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = RenderConfig()
        assert config.heading_class is None
        assert config.paragraph_class is None
        assert config.escape_attributes is False
        assert config.heading_ids is False
        assert config.cell_role == "any-right-aligned"
        assert config.toc_nesting == "step"
        assert config.toc_title == "Table of Contents"

    def test_immutability(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.heading_class = "x"  # type: ignore[misc]

    def test_unknown_cell_role(self) -> None:
        with pytest.raises(ConfigError, match="cell_role"):
            RenderConfig(cell_role="diagonal")

    def test_unknown_toc_nesting(self) -> None:
        with pytest.raises(ConfigError, match="toc_nesting"):
            RenderConfig(toc_nesting="spiral")

    def test_wrong_types(self) -> None:
        with pytest.raises(ConfigError):
            RenderConfig(heading_class=3)  # type: ignore[arg-type]
        with pytest.raises(ConfigError):
            RenderConfig(escape_attributes="yes")  # type: ignore[arg-type]

    def test_config_error_is_marktoc_error(self) -> None:
        with pytest.raises(MarktocError):
            RenderConfig(cell_role="nope")

    def test_replace(self) -> None:
        config = RenderConfig(heading_class="a", paragraph_class="p")
        updated = config.replace(paragraph_class="q", heading_ids=True)
        assert updated.heading_class == "a"
        assert updated.paragraph_class == "q"
        assert updated.heading_ids is True
        assert config.paragraph_class == "p"

    def test_replace_clears_class(self) -> None:
        config = RenderConfig(heading_class="a")
        assert config.replace(heading_class=None).heading_class is None

    def test_replace_validates(self) -> None:
        with pytest.raises(ConfigError):
            RenderConfig().replace(toc_nesting="spiral")


class TestFromDict:
    def test_known_keys(self) -> None:
        config = RenderConfig.from_dict({"heading_class": "t", "cell_role": "head-row"})
        assert config.heading_class == "t"
        assert config.cell_role == "head-row"

    def test_unknown_keys_ignored(self) -> None:
        config = RenderConfig.from_dict({"theme": "dark"})
        assert config == RenderConfig()

    def test_invalid_value(self) -> None:
        with pytest.raises(ConfigError):
            RenderConfig.from_dict({"toc_nesting": 1})


class TestFromToml:
    def test_marktoc_table(self, tmp_path) -> None:
        path = tmp_path / "marktoc.toml"
        path.write_text('[marktoc]\nparagraph_class = "lead"\nheading_ids = true\n')
        config = RenderConfig.from_toml(path)
        assert config.paragraph_class == "lead"
        assert config.heading_ids is True

    def test_top_level_keys(self, tmp_path) -> None:
        path = tmp_path / "render.toml"
        path.write_text('toc_nesting = "compact"\n')
        assert RenderConfig.from_toml(path).toc_nesting == "compact"

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="cannot read"):
            RenderConfig.from_toml(tmp_path / "absent.toml")

    def test_invalid_toml(self, tmp_path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("heading_class = \n")
        with pytest.raises(ConfigError, match="invalid TOML") as excinfo:
            RenderConfig.from_toml(path)
        assert excinfo.value.source_file == str(path)

    def test_invalid_value_reports_file(self, tmp_path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('cell_role = "nope"\n')
        with pytest.raises(ConfigError) as excinfo:
            RenderConfig.from_toml(path)
        assert str(path) in str(excinfo.value)

    def test_marktoc_not_a_table(self, tmp_path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('marktoc = "x"\n')
        with pytest.raises(ConfigError, match="must be a table"):
            RenderConfig.from_toml(path)


class TestContextVarFunctions:
    """get/set/reset and the context manager."""

    def teardown_method(self) -> None:
        reset_render_config()

    def test_default_config(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_get(self) -> None:
        set_render_config(RenderConfig(heading_class="x"))
        assert get_render_config().heading_class == "x"

    def test_reset(self) -> None:
        set_render_config(RenderConfig(heading_class="x"))
        reset_render_config()
        assert get_render_config().heading_class is None

    def test_context_manager_restores_previous(self) -> None:
        set_render_config(RenderConfig(heading_class="outer"))
        with render_config_context(RenderConfig(heading_class="inner")) as config:
            assert config.heading_class == "inner"
            assert get_render_config().heading_class == "inner"
        assert get_render_config().heading_class == "outer"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with render_config_context(RenderConfig(heading_class="inner")):
                raise RuntimeError("boom")
        assert get_render_config().heading_class is None

    def test_thread_isolation(self) -> None:
        set_render_config(RenderConfig(heading_class="main"))
        seen: list[str | None] = []

        def worker() -> None:
            set_render_config(RenderConfig(heading_class="worker"))
            seen.append(get_render_config().heading_class)

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == ["worker"]
        assert get_render_config().heading_class == "main"
