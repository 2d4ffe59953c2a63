"""
Skills Registry

Keyed store of parsed skills with agent-scoped lookup.
"""

from typing import Dict, List, Mapping, Optional, Tuple

from claw_harness.skills.parser import Skill

SHARED_SCOPE = "shared"


def make_key(scope: str, name: str) -> str:
    """Build a registry key (`<scope>/<name>`)."""
    return f"{scope}/{name}"


def split_key(key: str) -> Tuple[str, str]:
    """
    Split a registry key into scope and name.

    Only the first slash separates; skill names may contain slashes.

    Raises:
        ValueError: If the key has no scope
    """
    scope, sep, name = key.partition("/")
    if not sep or not scope:
        raise ValueError(f"Invalid skill key '{key}': expected '<scope>/<name>'")
    return scope, name


class SkillsRegistry:
    """
    Registry of skills keyed by `<scope>/<name>`.

    Scope is either an agent name or the shared scope. The registry is a
    passive store: it starts empty and its contents are replaced wholesale
    by SkillLoader on every load pass.
    """

    def __init__(self, shared_scope: str = SHARED_SCOPE) -> None:
        self._skills: Dict[str, Skill] = {}
        self._shared_scope = shared_scope

    @property
    def shared_scope(self) -> str:
        return self._shared_scope

    def get(self, key: str) -> Optional[Skill]:
        """
        Get a skill by key.

        Args:
            key: Registry key, e.g. "charlie/billing"

        Returns:
            Skill if found, None otherwise
        """
        return self._skills.get(key)

    def list(self) -> List[Skill]:
        """Get all registered skills."""
        return list(self._skills.values())

    def keys(self) -> List[str]:
        """Get all registry keys."""
        return list(self._skills.keys())

    def for_agent(self, agent_name: str) -> List[Skill]:
        """
        Get the skills visible to an agent.

        Args:
            agent_name: Agent identifier

        Returns:
            The agent's own skills plus shared skills, never another
            agent's private skills
        """
        return [skill for _, skill in self.items_for_agent(agent_name)]

    def items_for_agent(self, agent_name: str) -> List[Tuple[str, Skill]]:
        """Same selection as for_agent(), as (key, skill) pairs."""
        own_prefix = f"{agent_name}/"
        shared_prefix = f"{self._shared_scope}/"
        return [
            (key, skill)
            for key, skill in self._skills.items()
            if key.startswith(own_prefix) or key.startswith(shared_prefix)
        ]

    def items(self) -> List[Tuple[str, Skill]]:
        """Get all (key, skill) pairs."""
        return list(self._skills.items())

    def replace(self, skills: Mapping[str, Skill]) -> None:
        """
        Replace all registered skills.

        The new mapping is swapped in with a single assignment, so readers
        see either the previous or the new contents.

        Raises:
            ValueError: If any key is not `<scope>/<name>`
        """
        for key in skills:
            split_key(key)
        self._skills = dict(skills)

    def clear(self) -> None:
        self._skills = {}

    def __len__(self) -> int:
        return len(self._skills)

    def __contains__(self, key: object) -> bool:
        return key in self._skills
