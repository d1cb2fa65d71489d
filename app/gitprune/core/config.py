"""Configuration models and TOML I/O.

The configuration binds every Area to a repository path and its
deletion rules, and holds the toggles that control what a run is
allowed to change.

Configuration is stored in ~/.config/gitprune/config.toml
"""

import logging
import os
import re
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gitprune.core.paths import get_config_path, get_log_path
from gitprune.models.area import Area
from gitprune.models.ref import RefKind

logger = logging.getLogger(__name__)

# Repository directory names of the managed areas
DEFAULT_REPOSITORIES: dict[Area, str] = {
    Area.CORE: "tv-automation-server-core",
    Area.GATEWAY_INEWS: "inews-ftp-gateway",
    Area.BLUEPRINTS: "sofie-blueprints-inews",
    Area.TSR: "tv-automation-state-timeline-resolver",
}

DEFAULT_BRANCH_PATTERNS: dict[Area, list[str]] = {
    Area.CORE: [
        r"/feat/",
        r"/feature/",
        r"/fix/",
        r"/contribute/",
        r"/dist/",
        r"/test/",
        r"/refactor/",
    ],
    Area.GATEWAY_INEWS: [r"/feat/", r"/fix/"],
    Area.BLUEPRINTS: [r"/feat/", r"/test/", r"/chore/", r"/fix/"],
    Area.TSR: [],
}


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


class CleanupOptions(BaseModel):
    """Toggles controlling what a run may change.

    Attributes:
        allow_delete: Delete safe refs on the remote. When False a run only reports.
        one_at_a_time: Issue one git command per ref instead of one batched command.
        create_pull_requests: Request pull-request creation (not implemented; skipped).
        delete_local_tags: Also delete tags from the local repository.
    """

    model_config = ConfigDict(extra="forbid")

    allow_delete: Annotated[bool, Field(description="Delete safe refs")] = False
    one_at_a_time: Annotated[bool, Field(description="One git command per ref")] = True
    create_pull_requests: Annotated[
        bool,
        Field(description="Create pull requests (not implemented)"),
    ] = False
    delete_local_tags: Annotated[bool, Field(description="Also delete local tags")] = False


class AreaSettings(BaseModel):
    """Repository binding and rules for one area.

    Attributes:
        path: Absolute path of the local clone.
        default_branch: Branch unmerged changes are measured against (None = HEAD).
        branch_patterns: Regular expressions marking branches for deletion.
        tag_patterns: Regular expressions marking tags for deletion.
    """

    model_config = ConfigDict(extra="forbid")

    path: Annotated[Path, Field(description="Local clone of the repository")]
    default_branch: Annotated[
        str | None,
        Field(description="Target branch for unmerged checks"),
    ] = None
    branch_patterns: Annotated[
        list[str],
        Field(default_factory=list, description="Branch deletion rules"),
    ]
    tag_patterns: Annotated[
        list[str],
        Field(default_factory=list, description="Tag deletion rules"),
    ]

    @field_validator("path", mode="after")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        """Expand ``~`` in repository paths."""
        return v.expanduser()

    @field_validator("branch_patterns", "tag_patterns", mode="after")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Reject patterns that are not valid regular expressions."""
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                msg = f"invalid regular expression {pattern!r}: {e}"
                raise ValueError(msg) from None
        return v

    def patterns_for(self, kind: RefKind) -> list[re.Pattern[str]]:
        """Compile the rules for the given ref kind.

        Args:
            kind: Branch or tag.

        Returns:
            Compiled patterns in declaration order.
        """
        raw = self.branch_patterns if kind is RefKind.BRANCH else self.tag_patterns
        return [re.compile(pattern) for pattern in raw]


def _default_areas() -> dict[Area, AreaSettings]:
    code_dir = Path.home() / "code"
    return {
        area: AreaSettings(
            path=code_dir / repository,
            branch_patterns=list(DEFAULT_BRANCH_PATTERNS[area]),
        )
        for area, repository in DEFAULT_REPOSITORIES.items()
    }


class PruneConfig(BaseModel):
    """Complete gitprune configuration.

    Attributes:
        options: Toggles controlling deletion behaviour.
        areas: Repository binding and rules per area, in processing order.
        log_file: Append-only run log (None = default state path).
    """

    model_config = ConfigDict(extra="forbid")

    options: CleanupOptions = Field(default_factory=CleanupOptions)
    areas: Annotated[
        dict[Area, AreaSettings],
        Field(default_factory=_default_areas, description="Managed repositories"),
    ]
    log_file: Annotated[Path | None, Field(description="Run log path")] = None

    @property
    def effective_log_file(self) -> Path:
        """Get the log file path, falling back to the state directory."""
        if self.log_file is not None:
            return self.log_file.expanduser()
        return get_log_path()

    def select(self, areas: list[Area] | None = None) -> dict[Area, AreaSettings]:
        """Return configured areas, optionally restricted to a subset.

        Args:
            areas: Areas to keep. None or empty keeps all.

        Returns:
            Mapping in configuration order.
        """
        if not areas:
            return dict(self.areas)
        return {area: settings for area, settings in self.areas.items() if area in areas}


def get_default_config() -> PruneConfig:
    """Create a PruneConfig with built-in defaults."""
    return PruneConfig()


def load_config(path: Path | None = None) -> PruneConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated PruneConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return PruneConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e


def resolve_config(path: Path | None = None) -> PruneConfig:
    """Load the configuration a command should run with.

    An explicit path must exist. Without one, the default config file
    is used when present and the built-in defaults otherwise.

    Raises:
        ConfigError: If the configuration cannot be loaded.
    """
    if path is not None:
        return load_config(path)
    try:
        return load_config()
    except ConfigNotFoundError:
        logger.debug("No config file at %s, using built-in defaults", get_config_path())
        return get_default_config()


def save_config(config: PruneConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The PruneConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = config.model_dump(mode="json", exclude_none=True)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
