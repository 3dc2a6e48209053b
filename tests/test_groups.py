"""Unit tests for group config resolution."""

from pathlib import Path

import pytest

from webrunner.config import (
    GroupConfig,
    RunConfig,
    apply_group_focus,
    collect_group_configs,
    resolve_groups,
)
from webrunner.errors import (
    ConfigFileError,
    ConfigValidationError,
    GroupNotFoundError,
    ReservedGroupNameError,
)


class TestResolveGroups:
    """Test resolve_groups function."""

    @pytest.mark.asyncio
    async def test_no_groups(self, group_collector):
        assert await resolve_groups(None, group_collector) == []
        group_collector.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inline_groups_kept_in_order(self, group_collector):
        groups = await resolve_groups([{"name": "a"}, {"name": "b", "files": "b.js"}], group_collector)

        assert [g.name for g in groups] == ["a", "b"]
        assert groups[1].files == "b.js"
        group_collector.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_patterns_appended_after_inline_groups(self, group_collector):
        groups = await resolve_groups(
            ["groups/*.yaml", {"name": "inline"}, "more/*.yaml"], group_collector
        )

        assert [g.name for g in groups] == ["inline", "from-groups/*.yaml", "from-more/*.yaml"]
        group_collector.assert_awaited_once_with(["groups/*.yaml", "more/*.yaml"])

    @pytest.mark.asyncio
    async def test_single_string_pattern(self, group_collector):
        groups = await resolve_groups("groups/*.yaml", group_collector)

        assert [g.name for g in groups] == ["from-groups/*.yaml"]

    @pytest.mark.asyncio
    async def test_duplicate_names_not_deduplicated(self, group_collector):
        groups = await resolve_groups([{"name": "a"}, {"name": "a"}], group_collector)

        assert len(groups) == 2

    @pytest.mark.asyncio
    async def test_reserved_name_rejected(self, group_collector):
        with pytest.raises(ReservedGroupNameError, match='named "default"'):
            await resolve_groups([{"name": "a"}, {"name": "default"}], group_collector)

    @pytest.mark.asyncio
    async def test_reserved_name_from_collector_rejected(self):
        async def collect(patterns):
            return [GroupConfig(name="default")]

        with pytest.raises(ReservedGroupNameError):
            await resolve_groups(["*.yaml"], collect)

    @pytest.mark.asyncio
    async def test_inputs_not_modified(self, group_collector):
        inline = GroupConfig(name="a")
        groups = await resolve_groups([inline], group_collector)
        groups[0].files = "changed.js"

        assert inline.files is None

    @pytest.mark.asyncio
    async def test_group_without_name_rejected(self, group_collector):
        with pytest.raises(ConfigValidationError, match="group name"):
            await resolve_groups([{"files": "a.js"}], group_collector)

    @pytest.mark.asyncio
    async def test_invalid_entry_rejected(self, group_collector):
        with pytest.raises(ConfigValidationError, match="groups"):
            await resolve_groups([42], group_collector)


class TestApplyGroupFocus:
    """Test apply_group_focus function."""

    def test_no_focus_keeps_everything(self):
        config = RunConfig(files="test/**/*.js")
        groups = [GroupConfig(name="a"), GroupConfig(name="b")]

        assert apply_group_focus(config, groups, None) == groups
        assert config.files == "test/**/*.js"

    def test_focus_default_runs_only_root(self):
        config = RunConfig(files="test/**/*.js")
        groups = [GroupConfig(name="a"), GroupConfig(name="b")]

        assert apply_group_focus(config, groups, "default") == []
        assert config.files == "test/**/*.js"

    def test_focus_named_group(self):
        config = RunConfig(files="test/**/*.js")
        groups = [GroupConfig(name="a"), GroupConfig(name="b")]

        focused = apply_group_focus(config, groups, "a")

        assert focused == [GroupConfig(name="a", files="test/**/*.js")]
        assert config.files is None

    def test_focused_group_keeps_own_files(self):
        config = RunConfig(files="test/**/*.js")
        groups = [GroupConfig(name="a", files="a/**/*.js")]

        focused = apply_group_focus(config, groups, "a")

        assert focused[0].files == "a/**/*.js"
        assert config.files is None

    def test_first_match_wins(self):
        config = RunConfig()
        first = GroupConfig(name="a", files="first.js")
        second = GroupConfig(name="a", files="second.js")

        assert apply_group_focus(config, [first, second], "a") == [first]

    def test_unknown_group(self):
        with pytest.raises(GroupNotFoundError, match="Could not find any group named c"):
            apply_group_focus(RunConfig(), [GroupConfig(name="a")], "c")


class TestCollectGroupConfigs:
    """Test collect_group_configs function."""

    @pytest.mark.asyncio
    async def test_loads_matching_files(self, groups_dir: Path):
        groups = await collect_group_configs(["groups/*.yaml"], cwd=groups_dir)

        assert [g.name for g in groups] == ["firefox", "unit-tests"]
        assert groups[0].files == "test/firefox/**/*.test.js"
        assert groups[0].browsers == ["firefox"]
        assert groups[0].config_file_path == str((groups_dir / "groups" / "firefox.config.yaml").resolve())
        assert groups[1].files == ["test/unit/**/*.test.js"]

    @pytest.mark.asyncio
    async def test_files_matched_twice_loaded_once(self, groups_dir: Path):
        groups = await collect_group_configs(["groups/*.yaml", "groups/unit.yaml"], cwd=groups_dir)

        assert [g.name for g in groups] == ["firefox", "unit-tests"]

    @pytest.mark.asyncio
    async def test_no_matches(self, tmp_path: Path):
        assert await collect_group_configs(["missing/*.yaml"], cwd=tmp_path) == []

    @pytest.mark.asyncio
    async def test_unknown_keys_kept_as_extras(self, tmp_path: Path):
        (tmp_path / "slow.yaml").write_text("tests_finish_timeout: 300000\n")

        groups = await collect_group_configs(["*.yaml"], cwd=tmp_path)

        assert groups[0].name == "slow"
        assert groups[0].extras == {"tests_finish_timeout": 300000}

    @pytest.mark.asyncio
    async def test_invalid_group_file(self, tmp_path: Path):
        (tmp_path / "broken.yaml").write_text("- just\n- a list\n")

        with pytest.raises(ConfigFileError, match="must be a YAML mapping"):
            await collect_group_configs(["*.yaml"], cwd=tmp_path)
