"""
Skill Descriptor Parser

Parses skill descriptor files (markdown-like text) into typed Skill records.

A descriptor is read line by line with a single "current section" cursor.
Lines that do not match the grammar of the active section are ignored, so
parsing never fails on malformed content.
"""

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Tuple


class SkillLoadError(Exception):
    """Raised when a skill file cannot be read."""

    pass


HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")
DEFAULT_EXTENSION = ".md"

_ENDPOINT_RE = re.compile(r"^(GET|POST|PUT|PATCH|DELETE)\s+(\S+)\s*[-–]?\s*(.*)")
_BRACKET_LIST_RE = re.compile(r"\[([^\]]+)\]")
_FENCE = "```"
_UNREVIEWED_MARKER = "Reviewed: false"


class Section(str, Enum):
    """Descriptor sections the parser understands."""

    NONE = "none"
    AUTH = "auth"
    ENDPOINTS = "endpoints"
    IMPLEMENTATION = "implementation"
    PERMISSIONS = "permissions"
    SOURCE = "source"


SECTION_HEADINGS: Dict[str, Section] = {
    "## Auth": Section.AUTH,
    "## Endpoints": Section.ENDPOINTS,
    "## Implementation": Section.IMPLEMENTATION,
    "## Permissions": Section.PERMISSIONS,
    "## Source": Section.SOURCE,
}


@dataclass(frozen=True)
class AuthTemplate:
    """
    Auth settings declared by a skill.

    `header` may contain unresolved `{{secrets.<key>}}` placeholders.
    """

    base_url: Optional[str] = None
    header: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"base_url": self.base_url, "header": self.header}


@dataclass(frozen=True)
class Endpoint:
    """A single HTTP endpoint described by a skill."""

    method: str
    path: str
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"method": self.method, "path": self.path, "description": self.description}


@dataclass(frozen=True)
class Permissions:
    """
    Declared permission grants. Defaults are the most restrictive grant.
    """

    http: FrozenSet[str] = frozenset()
    shell: bool = False
    file: bool = False

    def allows_domain(self, domain: str) -> bool:
        """
        Check whether outbound HTTP to a domain is declared.

        Args:
            domain: Host name (case-insensitive)

        Returns:
            True if the domain is in the allowlist
        """
        domain_lower = domain.lower()
        return any(d.lower() == domain_lower for d in self.http)

    def to_dict(self) -> Dict[str, Any]:
        return {"http": sorted(self.http), "shell": self.shell, "file": self.file}


@dataclass(frozen=True)
class Skill:
    """
    A parsed skill descriptor.

    `auth` is None when the descriptor has no Auth section, and an
    AuthTemplate (possibly with both fields None) when it has one.
    `implementation` is None unless a fenced code block was found in
    the Implementation section.
    """

    name: str
    raw: str = ""
    auth: Optional[AuthTemplate] = None
    endpoints: Tuple[Endpoint, ...] = ()
    implementation: Optional[str] = None
    permissions: Permissions = field(default_factory=Permissions)
    source: Optional[str] = None
    trusted: bool = True
    source_path: Optional[str] = None

    @property
    def has_code(self) -> bool:
        return self.implementation is not None

    @property
    def base_url(self) -> Optional[str]:
        return self.auth.base_url if self.auth else None

    @property
    def header(self) -> Optional[str]:
        return self.auth.header if self.auth else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert skill to dictionary."""
        return {
            "name": self.name,
            "auth": self.auth.to_dict() if self.auth else None,
            "endpoints": [e.to_dict() for e in self.endpoints],
            "implementation": self.implementation,
            "permissions": self.permissions.to_dict(),
            "source": self.source,
            "trusted": self.trusted,
            "source_path": self.source_path,
        }


def default_skill_name(filename: str, extension: str = DEFAULT_EXTENSION) -> str:
    """Derive a skill name from its file name (`billing.md` -> `billing`)."""
    base = Path(filename).name
    if extension and base.endswith(extension):
        return base[: -len(extension)]
    return base


class SkillParser:
    """
    Single-pass state machine over the lines of one descriptor.

    Each section has its own handler; headings drive the transitions.
    A parser instance is used for exactly one descriptor.
    """

    def __init__(self, name: str) -> None:
        self.section = Section.NONE
        self.name = name
        self.auth: Optional[AuthTemplate] = None
        self.endpoints: List[Endpoint] = []
        self.in_code = False
        self.code: Optional[str] = None
        self.http: FrozenSet[str] = frozenset()
        self.shell = False
        self.file = False
        self.source: Optional[str] = None
        self.trusted = True

        self._handlers = {
            Section.NONE: self._handle_none,
            Section.AUTH: self._handle_auth,
            Section.ENDPOINTS: self._handle_endpoints,
            Section.IMPLEMENTATION: self._handle_implementation,
            Section.PERMISSIONS: self._handle_permissions,
            Section.SOURCE: self._handle_source,
        }

    def feed(self, line: str) -> None:
        """Process one line (without its terminator)."""
        stripped = line.strip()

        # Inside a fenced block every line is code, headings included.
        if self.in_code:
            self._handle_implementation(line, stripped)
            return

        if stripped.startswith("# ") and not stripped.startswith("## "):
            self.name = stripped[2:].strip()
            return

        if stripped in SECTION_HEADINGS:
            self._enter(SECTION_HEADINGS[stripped])
            return
        if stripped.startswith("## "):
            self._enter(Section.NONE)
            return

        self._handlers[self.section](line, stripped)

    def _enter(self, section: Section) -> None:
        self.section = section
        if section is Section.AUTH and self.auth is None:
            self.auth = AuthTemplate()

    def _handle_none(self, line: str, stripped: str) -> None:
        pass

    def _handle_auth(self, line: str, stripped: str) -> None:
        if stripped.startswith("Base URL:"):
            self.auth = replace(self.auth, base_url=stripped[len("Base URL:"):].strip())
        elif stripped.startswith("Header:"):
            self.auth = replace(self.auth, header=stripped[len("Header:"):].strip())

    def _handle_endpoints(self, line: str, stripped: str) -> None:
        match = _ENDPOINT_RE.match(stripped)
        if match:
            self.endpoints.append(
                Endpoint(
                    method=match.group(1),
                    path=match.group(2),
                    description=match.group(3).strip(),
                )
            )

    def _handle_implementation(self, line: str, stripped: str) -> None:
        if stripped.startswith(_FENCE):
            self.in_code = not self.in_code
            if self.in_code and self.code is None:
                self.code = ""
            return
        if self.in_code:
            self.code += line + "\n"

    def _handle_permissions(self, line: str, stripped: str) -> None:
        if stripped.startswith("- http:"):
            domains = _BRACKET_LIST_RE.search(stripped)
            if domains:
                items = (d.strip() for d in domains.group(1).split(","))
                self.http = frozenset(d for d in items if d)
        if "shell:" in stripped and "none" not in stripped:
            self.shell = True
        if "file:" in stripped and "none" not in stripped:
            self.file = True

    def _handle_source(self, line: str, stripped: str) -> None:
        if stripped.startswith("Imported from"):
            self.source = stripped
            self.trusted = _UNREVIEWED_MARKER not in stripped

    def build(self, raw: str, source_path: Optional[str] = None) -> Skill:
        """Produce the immutable Skill for everything fed so far."""
        return Skill(
            name=self.name,
            raw=raw,
            auth=self.auth,
            endpoints=tuple(self.endpoints),
            implementation=self.code,
            permissions=Permissions(http=self.http, shell=self.shell, file=self.file),
            source=self.source,
            trusted=self.trusted,
            source_path=source_path,
        )


def parse_skill(
    filename: str,
    content: str,
    source_path: Optional[str] = None,
    extension: str = DEFAULT_EXTENSION,
) -> Skill:
    """
    Parse descriptor text into a Skill.

    Args:
        filename: File name, used for the default skill name
        content: Full descriptor text
        source_path: Optional path recorded on the skill
        extension: Descriptor extension stripped from the default name

    Returns:
        Parsed Skill (never raises for malformed content)
    """
    parser = SkillParser(default_skill_name(filename, extension))
    text = content[1:] if content.startswith("\ufeff") else content
    for line in text.split("\n"):
        parser.feed(line.rstrip("\r"))
    return parser.build(raw=content, source_path=source_path)


def load_skill(path: Path, extension: str = DEFAULT_EXTENSION) -> Skill:
    """
    Load a skill from a descriptor file.

    Args:
        path: Path to the descriptor

    Returns:
        Parsed Skill

    Raises:
        SkillLoadError: If the file cannot be read
    """
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise SkillLoadError(f"Cannot read skill file {path}: {e}") from e

    return parse_skill(path.name, content, source_path=str(path), extension=extension)
