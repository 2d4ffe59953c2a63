"""
Claw Harness Skills

Skill descriptor parsing, workspace scanning and the skill registry.
"""

from claw_harness.skills.loader import SkillLoader
from claw_harness.skills.parser import (
    AuthTemplate,
    Endpoint,
    Permissions,
    Section,
    Skill,
    SkillLoadError,
    SkillParser,
    load_skill,
    parse_skill,
)
from claw_harness.skills.registry import SHARED_SCOPE, SkillsRegistry, make_key, split_key

__all__ = [
    "AuthTemplate",
    "Endpoint",
    "Permissions",
    "Section",
    "Skill",
    "SkillLoadError",
    "SkillLoader",
    "SkillParser",
    "SkillsRegistry",
    "SHARED_SCOPE",
    "load_skill",
    "make_key",
    "parse_skill",
    "split_key",
]
