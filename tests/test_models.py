"""
Tests for domain models — Manifest tolerance, Tool order, CheckResult.
"""

from enginecheck.core.detection.tool_version import VERSION_COMMANDS
from enginecheck.core.models import CheckResult, Manifest, Tool


class TestManifest:
    def test_defaults(self):
        m = Manifest()
        assert m.name is None
        assert m.version is None
        assert m.engines == {}
        assert m.volta == {}

    def test_full(self):
        m = Manifest.model_validate({
            "name": "my-project",
            "version": "1.0.0",
            "engines": {"node": "^16", "npm": "^8"},
            "volta": {"node": "16.14.0"},
        })
        assert m.name == "my-project"
        assert m.engines == {"node": "^16", "npm": "^8"}
        assert m.volta == {"node": "16.14.0"}

    def test_extra_keys_ignored(self):
        m = Manifest.model_validate({
            "name": "x",
            "dependencies": {"left-pad": "1.0.0"},
            "scripts": {"test": "jest"},
        })
        assert m.name == "x"
        assert not hasattr(m, "dependencies")

    def test_legacy_array_engines(self):
        m = Manifest.model_validate({"engines": ["node >= 0.4"]})
        assert m.engines == {}

    def test_non_string_ranges_keep_their_keys(self):
        m = Manifest.model_validate({
            "engines": {"node": 16, "npm": None, "yarn": {"min": 1}, "pnpm": True},
        })
        assert m.engines == {"node": "16", "npm": "", "yarn": "", "pnpm": ""}
        assert m.declares("npm")
        assert m.declares("yarn")

    def test_non_string_name(self):
        m = Manifest.model_validate({"name": ["a"], "version": 2})
        assert m.name is None
        assert m.version == "2"

    def test_declares(self):
        m = Manifest(engines={"node": "^16"}, volta={"yarn": "1.22.19"})
        assert m.declares("node")
        assert m.declares("yarn")
        assert not m.declares("npm")


class TestTool:
    def test_order(self):
        assert [t.value for t in Tool] == ["node", "npm", "yarn"]

    def test_str(self):
        assert str(Tool.NPM) == "npm"

    def test_lookup_by_value(self):
        assert Tool("yarn") is Tool.YARN

    def test_every_tool_has_version_command(self):
        assert set(VERSION_COMMANDS) == set(Tool)
        for tool, command in VERSION_COMMANDS.items():
            assert command == [tool.value, "--version"]


class TestCheckResult:
    def test_defaults(self):
        r = CheckResult(tool=Tool.NODE, active_version="18.2.0")
        assert r.satisfied
        assert r.required_range is None

    def test_value_equality(self):
        a = CheckResult(Tool.NODE, "16.14.0", "^16", True)
        b = CheckResult(Tool.NODE, "16.14.0", "^16", True)
        assert a == b
