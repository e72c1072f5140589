"""Configuration for the release PR generator."""

import os
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import List, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from .errors import ConfigError
from .models import AssignmentPolicy, GlobalSettings, ProjectDefinition
from .utils import get_logger


DEFAULT_CONFIG_FILE = "./release-pr.yaml"
DEFAULT_OWNER = "HRG-Technologies-LLC"
DEFAULT_USER_AGENT = "HRG GitHub Utilities"
DEFAULT_TIMEZONE = "Pacific/Honolulu"
DATE_FORMAT = "%m-%d-%Y"  # MM-dd-yyyy

DEFAULT_PROJECTS = (
    ProjectDefinition("JLV - CCP", "JLV", "cvccp_dev_{version}", "cvccp_test_{version}"),
    ProjectDefinition("JLV - VAS", "JLV", "cvvas_dev_{version}", "cvvas_test_{version}"),
    ProjectDefinition("JMeadows - CCP", "jMeadows", "cvccp_dev_{version}", "cvccp_test_{version}"),
    ProjectDefinition("JMeadows - VAS", "jMeadows", "cvvas_dev_{version}", "cvvas_test_{version}"),
    ProjectDefinition("HuiCore", "HuiCore", "cv_dev_{version}", "cv_test_{version}"),
    ProjectDefinition("VistA Data Service", "VistaDataService", "cv_dev_{version}", "cv_test_{version}"),
    ProjectDefinition("JLV QoS", "jlvqos", "cv_dev_{version}", "cv_test_{version}"),
    ProjectDefinition("Report Builder", "ReportBuilder", "cv_dev_{version}", "cv_test_{version}"),
)


def parse_names(value) -> List[str]:
    """Normalize a comma separated string or a list into a list of names."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
    else:
        raise ConfigError(f"Expected a list of names, got {value!r}")
    return [item.strip() for item in items if item.strip()]


def parse_policy(value) -> AssignmentPolicy:
    """Parse an assignment policy name."""
    if isinstance(value, AssignmentPolicy):
        return value
    try:
        return AssignmentPolicy(str(value).lower())
    except ValueError:
        choices = ", ".join(p.value for p in AssignmentPolicy)
        raise ConfigError(f"Unknown assignment policy {value!r} (expected one of: {choices})")


def run_date(timezone: str, now: Optional[datetime] = None) -> str:
    """
    Format the run date as MM-dd-yyyy in the given timezone.

    Raises:
        ConfigError: If the timezone is unknown
    """
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        raise ConfigError(f"Unknown timezone: {timezone!r}")

    moment = now.astimezone(tz) if now else datetime.now(tz)
    return moment.strftime(DATE_FORMAT)


@dataclass
class ReleaseConfig:
    """
    Raw release configuration, as read from the settings file and CLI.

    Values may be incomplete until interactive collection has run;
    to_settings() validates and freezes them into GlobalSettings.
    """

    # Release settings
    version: str = ""
    assignees: List[str] = field(default_factory=list)
    reviewers: List[str] = field(default_factory=list)
    assignment_policy: AssignmentPolicy = AssignmentPolicy.IGNORE

    # GitHub settings
    owner: str = DEFAULT_OWNER
    token: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    timezone: str = DEFAULT_TIMEZONE

    projects: List[ProjectDefinition] = field(default_factory=lambda: list(DEFAULT_PROJECTS))

    # Run-only flags, never persisted
    automatic: bool = False
    debug: bool = False

    @classmethod
    def from_dict(cls, data: Mapping) -> "ReleaseConfig":
        """Create config from a settings file mapping, filling in defaults."""
        config = cls()

        # YAML reads an unquoted 3.10 as the float 3.1, which would name the wrong branches
        version = data.get("version")
        if version is not None and not isinstance(version, str):
            raise ConfigError(
                f"'version' must be a quoted string in the settings file (got {version!r}); "
                f"write it as version: \"{version}\""
            )

        for key in ("version", "owner", "token", "user_agent", "timezone"):
            if data.get(key) is not None:
                setattr(config, key, str(data[key]))
        if "assignees" in data:
            config.assignees = parse_names(data["assignees"])
        if "reviewers" in data:
            config.reviewers = parse_names(data["reviewers"])
        if data.get("assignment_policy") is not None:
            config.assignment_policy = parse_policy(data["assignment_policy"])

        if data.get("projects") is not None:
            entries = data["projects"]
            if not isinstance(entries, list):
                raise ConfigError("'projects' must be a list")
            config.projects = [ProjectDefinition.from_dict(entry) for entry in entries]

        config.check_projects()
        return config

    def to_dict(self) -> dict:
        """Serialize the persistent part of the config."""
        return {
            "version": self.version,
            "owner": self.owner,
            "user_agent": self.user_agent,
            "timezone": self.timezone,
            "token": self.token,
            "assignees": list(self.assignees),
            "reviewers": list(self.reviewers),
            "assignment_policy": self.assignment_policy.value,
            "projects": [project.to_dict() for project in self.projects],
        }

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> "ReleaseConfig":
        """Override values from environment variables."""
        environ = os.environ if environ is None else environ

        if environ.get("GITHUB_TOKEN"):
            self.token = environ["GITHUB_TOKEN"]
        if environ.get("RELEASE_PR_VERSION"):
            self.version = environ["RELEASE_PR_VERSION"]
        if environ.get("RELEASE_PR_ASSIGNEES"):
            self.assignees = parse_names(environ["RELEASE_PR_ASSIGNEES"])
        return self

    def check_projects(self):
        """Raise ConfigError unless there is at least one uniquely named project."""
        if not self.projects:
            raise ConfigError("No projects configured")

        seen = set()
        for project in self.projects:
            if project.name in seen:
                raise ConfigError(f"Duplicate project name: {project.name!r}")
            seen.add(project.name)

    def to_settings(self, now: Optional[datetime] = None) -> GlobalSettings:
        """
        Freeze the config into validated run settings.

        Raises:
            ConfigError: If a required value is missing
        """
        self.check_projects()
        settings = GlobalSettings(
            owner=self.owner,
            token=self.token,
            user_agent=self.user_agent,
            timezone=self.timezone,
            version=self.version.strip(),
            date=run_date(self.timezone, now),
            assignees=tuple(self.assignees),
            reviewers=tuple(self.reviewers),
            automatic=self.automatic,
            debug=self.debug,
            assignment_policy=self.assignment_policy,
        )
        return settings.validate()

    def with_overrides(self, **values) -> "ReleaseConfig":
        """Return a copy with the non-None values replaced."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})


class ConfigStore:
    """Reads and writes the YAML settings file."""

    def __init__(self, path=DEFAULT_CONFIG_FILE):
        self.path = Path(path)
        self.logger = get_logger()

    def read(self) -> dict:
        """
        Read the settings file.

        A missing or unreadable file yields an empty mapping so defaults apply.

        Raises:
            ConfigError: If the file parses but is not a mapping
        """
        self.logger.info(f"Reading config file {self.path}...")
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            self.logger.warning(f"Couldn't load file {self.path}, using default values... ({e})")
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{self.path} must contain a YAML mapping")
        return data

    def load(self) -> ReleaseConfig:
        """Read the settings file into a ReleaseConfig."""
        return ReleaseConfig.from_dict(self.read())

    def save(self, config: ReleaseConfig) -> bool:
        """
        Write the persistent part of the config back to the settings file.

        Returns:
            True if the file was written
        """
        self.logger.info(f"Writing config file {self.path}...")
        try:
            self.path.write_text(dump_config(config), encoding="utf-8")
            return True
        except OSError as e:
            self.logger.warning(f"Couldn't save file {self.path}: {e}")
            return False


def dump_config(config: ReleaseConfig) -> str:
    """Render a config as YAML."""
    return yaml.safe_dump(
        config.to_dict(),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
