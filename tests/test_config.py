"""
Tests for claw_harness.config
"""

from pathlib import Path

from claw_harness.config import (
    DEFAULT_WORKSPACE_ROOT,
    EXTENSION_ENV_VAR,
    WORKSPACE_ENV_VAR,
    SkillsConfig,
    WorkspaceConfig,
    get_workspace_root,
)


class TestSkillsConfig:
    """Tests for SkillsConfig."""

    def test_default_values(self):
        """Test default skill settings."""
        config = SkillsConfig()
        assert config.enabled is True
        assert config.extension == ".md"
        assert config.internal_prefix == "_"
        assert config.shared_scope == "shared"

    def test_from_dict(self):
        """Test creation from dict."""
        config = SkillsConfig.from_dict({"extension": ".skill", "enabled": False})
        assert config.extension == ".skill"
        assert config.enabled is False
        assert config.internal_prefix == "_"


class TestWorkspaceConfig:
    """Tests for WorkspaceConfig."""

    def test_layout(self, tmp_path):
        """Test derived workspace paths."""
        config = WorkspaceConfig(root=tmp_path)
        assert config.agents_dir == tmp_path / "agents"
        assert config.shared_skills_dir == tmp_path / "shared" / "skills"
        assert config.agent_skills_dir("charlie") == tmp_path / "agents" / "charlie" / "skills"

    def test_string_root_converted(self, tmp_path):
        """Test that string roots become Path objects."""
        config = WorkspaceConfig(root=str(tmp_path))
        assert isinstance(config.root, Path)
        assert config.root == tmp_path

    def test_home_expanded(self):
        config = WorkspaceConfig(root="~/workspace")
        assert "~" not in str(config.root)

    def test_to_dict(self, tmp_path):
        d = WorkspaceConfig(root=tmp_path).to_dict()
        assert d["root"] == str(tmp_path)
        assert d["shared_skills_dir"] == str(tmp_path / "shared" / "skills")
        assert d["skills"]["extension"] == ".md"

    def test_from_env(self, tmp_path, monkeypatch):
        """Test workspace root from the environment."""
        monkeypatch.setenv(WORKSPACE_ENV_VAR, str(tmp_path))
        assert WorkspaceConfig.from_env().root == tmp_path

    def test_from_env_explicit_root_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv(WORKSPACE_ENV_VAR, "/somewhere/else")
        assert WorkspaceConfig.from_env(tmp_path).root == tmp_path

    def test_from_env_extension(self, tmp_path, monkeypatch):
        """Test descriptor extension from the environment."""
        monkeypatch.setenv(EXTENSION_ENV_VAR, "skill")
        assert WorkspaceConfig.from_env(tmp_path).skills.extension == ".skill"

        monkeypatch.setenv(EXTENSION_ENV_VAR, ".txt")
        assert WorkspaceConfig.from_env(tmp_path).skills.extension == ".txt"


class TestGetWorkspaceRoot:
    """Tests for get_workspace_root."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv(WORKSPACE_ENV_VAR, raising=False)
        assert get_workspace_root() == DEFAULT_WORKSPACE_ROOT

    def test_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv(WORKSPACE_ENV_VAR, str(tmp_path))
        assert get_workspace_root() == tmp_path
