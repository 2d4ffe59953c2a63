"""
Claw Harness - skill descriptors for agent runtimes

Loads skill descriptors from a workspace and exposes them per agent.

Primary API:
    from claw_harness import SkillLoader, WorkspaceConfig

    loader = SkillLoader(WorkspaceConfig(root="~/.quantumclaw/workspace"))
    count = loader.load_all()

    for skill in loader.for_agent("charlie"):
        print(skill.name, skill.permissions.http)
"""

__version__ = "0.1.0"

from claw_harness.config import SkillsConfig, WorkspaceConfig, get_workspace_root
from claw_harness.skills import (
    AuthTemplate,
    Endpoint,
    Permissions,
    Skill,
    SkillLoadError,
    SkillLoader,
    SkillsRegistry,
    load_skill,
    parse_skill,
)

__all__ = [
    "__version__",
    "AuthTemplate",
    "Endpoint",
    "Permissions",
    "Skill",
    "SkillLoadError",
    "SkillLoader",
    "SkillsConfig",
    "SkillsRegistry",
    "WorkspaceConfig",
    "get_workspace_root",
    "load_skill",
    "parse_skill",
]
