"""
Skills Loader

Scans the workspace for skill descriptors and fills a SkillsRegistry.

Per-agent skills live in `agents/<agent>/skills/`, shared skills in
`shared/skills/`. A file that cannot be loaded is logged and skipped;
one bad file never fails the whole pass.
"""

import asyncio
import logging
from pathlib import Path
from typing import Dict, List, Optional

from claw_harness.config import WorkspaceConfig
from claw_harness.skills.parser import Skill, load_skill
from claw_harness.skills.registry import SkillsRegistry, make_key

logger = logging.getLogger(__name__)


def _is_hidden_path(path: Path) -> bool:
    return path.name.startswith(".")


def _iter_descriptor_files(directory: Path, extension: str) -> List[Path]:
    if not directory.is_dir():
        return []
    files: List[Path] = []
    for path in sorted(directory.iterdir()):
        if _is_hidden_path(path) or not path.name.endswith(extension):
            continue
        # Anything else, dangling links included, goes to load_skill so
        # read failures are reported.
        if path.is_dir():
            continue
        files.append(path)
    return files


class SkillLoader:
    """
    Loads skills from a workspace into a registry.

    Every call to load_all() is a full pass: the registry is cleared and
    repopulated, so skills whose files were removed disappear.
    """

    def __init__(
        self,
        config: Optional[WorkspaceConfig] = None,
        registry: Optional[SkillsRegistry] = None,
    ) -> None:
        """
        Initialize skill loader.

        Args:
            config: Workspace configuration (resolved from env if None)
            registry: Registry to populate (a new one is created if None)
        """
        self.config = config or WorkspaceConfig.from_env()
        self.registry = registry or SkillsRegistry(
            shared_scope=self.config.skills.shared_scope
        )

    def list_agents(self) -> List[str]:
        """
        List agent scopes in the workspace.

        Returns:
            Sorted agent directory names, excluding internal ones and any
            directory named like the shared scope
        """
        agents_dir = self.config.agents_dir
        if not agents_dir.is_dir():
            return []
        prefix = self.config.skills.internal_prefix
        shared_scope = self.config.skills.shared_scope
        agents: List[str] = []
        for path in sorted(agents_dir.iterdir()):
            if not path.is_dir() or _is_hidden_path(path):
                continue
            if prefix and path.name.startswith(prefix):
                continue
            if path.name == shared_scope:
                logger.warning(
                    f"Skipping agent directory {path}: name collides with the "
                    f"'{shared_scope}' scope"
                )
                continue
            agents.append(path.name)
        return agents

    def load_all(self) -> int:
        """
        Run one full load pass.

        Returns:
            Number of skill files loaded successfully
        """
        skills_config = self.config.skills
        if not skills_config.enabled:
            logger.debug("Skills disabled, registry cleared")
            self.registry.clear()
            return 0

        loaded: Dict[str, Skill] = {}
        total = 0

        agents = self.list_agents()
        if not agents:
            logger.debug(f"No agent scopes under {self.config.agents_dir}")

        for agent_name in agents:
            skills_dir = self.config.agent_skills_dir(agent_name)
            if not skills_dir.is_dir():
                logger.debug(f"Agent '{agent_name}' has no skills directory")
                continue
            total += self._load_scope(agent_name, skills_dir, loaded)

        shared_dir = self.config.shared_skills_dir
        if shared_dir.is_dir():
            total += self._load_scope(skills_config.shared_scope, shared_dir, loaded)
        else:
            logger.debug(f"No shared skills directory at {shared_dir}")

        self.registry.replace(loaded)
        logger.info(f"{total} skills loaded")
        return total

    async def aload_all(self) -> int:
        """Run load_all() in a worker thread."""
        return await asyncio.to_thread(self.load_all)

    def _load_scope(self, scope: str, directory: Path, loaded: Dict[str, Skill]) -> int:
        extension = self.config.skills.extension
        count = 0
        for path in _iter_descriptor_files(directory, extension):
            try:
                skill = load_skill(path, extension=extension)
            except Exception as e:
                logger.warning(f"Failed to load skill {scope}/{path.name}: {e}")
                continue

            key = make_key(scope, skill.name)
            if key in loaded:
                logger.debug(
                    f"Skill key '{key}' from {path.name} replaces {loaded[key].source_path}"
                )
            loaded[key] = skill
            count += 1
        return count

    def get(self, key: str) -> Optional[Skill]:
        return self.registry.get(key)

    def list(self) -> List[Skill]:
        return self.registry.list()

    def for_agent(self, agent_name: str) -> List[Skill]:
        return self.registry.for_agent(agent_name)
