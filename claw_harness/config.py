"""
Claw Harness Configuration

Workspace layout and skill loading settings.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union


WORKSPACE_ENV_VAR = "CLAW_WORKSPACE"
EXTENSION_ENV_VAR = "CLAW_SKILL_EXTENSION"
DEFAULT_WORKSPACE_ROOT = Path.home() / ".quantumclaw" / "workspace"
DEFAULT_AGENTS_DIR = "agents"
DEFAULT_SHARED_DIR = "shared"
DEFAULT_SKILLS_DIR = "skills"


@dataclass
class SkillsConfig:
    """Skills system configuration."""

    enabled: bool = True
    extension: str = ".md"
    # Agent directories starting with this prefix are internal, not agents
    internal_prefix: str = "_"
    shared_scope: str = "shared"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SkillsConfig":
        """Create from dictionary."""
        return cls(
            enabled=data.get("enabled", True),
            extension=data.get("extension", ".md"),
            internal_prefix=data.get("internal_prefix", "_"),
            shared_scope=data.get("shared_scope", "shared"),
        )


@dataclass
class WorkspaceConfig:
    """
    Workspace paths.

    Layout:
        <root>/agents/<agent>/skills/*.md
        <root>/shared/skills/*.md
    """

    root: Path = field(default_factory=lambda: DEFAULT_WORKSPACE_ROOT)
    skills: SkillsConfig = field(default_factory=SkillsConfig)

    def __post_init__(self):
        """Ensure root is an expanded Path."""
        if isinstance(self.root, str):
            self.root = Path(self.root)
        self.root = self.root.expanduser()

    @property
    def agents_dir(self) -> Path:
        """Directory holding one subdirectory per agent."""
        return self.root / DEFAULT_AGENTS_DIR

    @property
    def shared_skills_dir(self) -> Path:
        """Skills visible to every agent."""
        return self.root / DEFAULT_SHARED_DIR / DEFAULT_SKILLS_DIR

    def agent_skills_dir(self, agent_name: str) -> Path:
        """Private skills directory of one agent."""
        return self.agents_dir / agent_name / DEFAULT_SKILLS_DIR

    @classmethod
    def from_env(cls, root: Optional[Union[str, Path]] = None) -> "WorkspaceConfig":
        """
        Build configuration from the environment.

        Args:
            root: Explicit workspace root, overrides the environment

        Returns:
            WorkspaceConfig instance
        """
        if root is None:
            root = get_workspace_root()
        skills = SkillsConfig()
        extension = os.environ.get(EXTENSION_ENV_VAR)
        if extension:
            skills.extension = extension if extension.startswith(".") else f".{extension}"
        return cls(root=Path(root), skills=skills)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "root": str(self.root),
            "agents_dir": str(self.agents_dir),
            "shared_skills_dir": str(self.shared_skills_dir),
            "skills": {
                "enabled": self.skills.enabled,
                "extension": self.skills.extension,
                "internal_prefix": self.skills.internal_prefix,
                "shared_scope": self.skills.shared_scope,
            },
        }


def get_workspace_root() -> Path:
    """Workspace root from CLAW_WORKSPACE, or the default under the home dir."""
    value = os.environ.get(WORKSPACE_ENV_VAR)
    if value:
        return Path(value).expanduser()
    return DEFAULT_WORKSPACE_ROOT
