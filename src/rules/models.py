from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.core.constants import DEFAULT_REQUIRED_LENGTH, STATUS_CONTEXT
from src.core.errors import ConfigurationError


class PullRequestAction(str, Enum):
    """Pull request webhook actions relevant to the specification check."""

    OPENED = "opened"
    EDITED = "edited"
    REOPENED = "reopened"
    SYNCHRONIZE = "synchronize"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> "PullRequestAction":
        return cls.OTHER


class PullRequestState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"

    @classmethod
    def _missing_(cls, value: object) -> "PullRequestState":
        return cls.CLOSED


class PullRequestEvent(BaseModel):
    """Immutable snapshot of the pull request fields the check evaluates."""

    model_config = ConfigDict(frozen=True)

    action: PullRequestAction
    state: PullRequestState
    number: int | None = None
    title: str = ""
    body: str = ""
    head_sha: str
    repository_owner: str
    repository_name: str

    @property
    def repo_full_name(self) -> str:
        return f"{self.repository_owner}/{self.repository_name}"

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "PullRequestEvent":
        """Build the snapshot from a raw `pull_request` webhook payload."""
        pr = payload.get("pull_request") or {}
        repo = payload.get("repository") or {}
        return cls(
            action=PullRequestAction(payload.get("action")),
            state=PullRequestState(pr.get("state", "closed")),
            number=pr.get("number"),
            title=pr.get("title") or "",
            body=pr.get("body") or "",
            head_sha=(pr.get("head") or {}).get("sha", ""),
            repository_owner=(repo.get("owner") or {}).get("login", ""),
            repository_name=repo.get("name", ""),
        )


def _enabled_flag(value: Any) -> Any:
    """Accept both `check: true` and `check: {enabled: true}` forms."""
    if isinstance(value, dict):
        return value.get("enabled", True)
    return value


def _length_check(value: Any) -> Any:
    """Accept `minimum-length: false` as shorthand for `{enabled: false}`."""
    if value is None:
        return {}
    if isinstance(value, bool):
        return {"enabled": value}
    return value


def _section(value: Any) -> Any:
    # A bare `true`/`false` section keeps the defaults
    return {} if value is None or isinstance(value, bool) else value


class MinimumLengthCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    length: int = DEFAULT_REQUIRED_LENGTH


class TitleChecks(BaseModel):
    """Checks applied to the pull request title."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    minimum_length: MinimumLengthCheck = Field(default_factory=MinimumLengthCheck, alias="minimum-length")

    @field_validator("minimum_length", mode="before")
    @classmethod
    def _normalize_length(cls, value: Any) -> Any:
        return _length_check(value)


class BodyChecks(BaseModel):
    """Checks applied to the pull request body; at least one enabled check must pass."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    minimum_length: MinimumLengthCheck = Field(default_factory=MinimumLengthCheck, alias="minimum-length")
    contains_url: bool = Field(True, alias="contains-url")
    contains_issue_number: bool = Field(True, alias="contains-issue-number")

    @field_validator("minimum_length", mode="before")
    @classmethod
    def _normalize_length(cls, value: Any) -> Any:
        return _length_check(value)

    @field_validator("contains_url", "contains_issue_number", mode="before")
    @classmethod
    def _normalize_flag(cls, value: Any) -> Any:
        return True if value is None else _enabled_flag(value)


class TemplateChecks(BaseModel):
    """Checks comparing the body against the repository's pull request template."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    was_adjusted: bool = Field(False, alias="was-adjusted")

    @field_validator("was_adjusted", mode="before")
    @classmethod
    def _normalize_flag(cls, value: Any) -> Any:
        return False if value is None else _enabled_flag(value)


class SpecificationConfig(BaseModel):
    """
    The `specification` section of a repository configuration.

    Every field has a default, so an absent or partial section still
    yields a fully resolved configuration.
    """

    model_config = ConfigDict(frozen=True)

    title: TitleChecks = Field(default_factory=TitleChecks)
    body: BodyChecks = Field(default_factory=BodyChecks)
    template: TemplateChecks = Field(default_factory=TemplateChecks)

    @field_validator("title", "body", "template", mode="before")
    @classmethod
    def _default_sections(cls, value: Any) -> Any:
        return _section(value)

    @classmethod
    def from_repo_config(cls, repo_config: dict[str, Any] | None) -> "SpecificationConfig":
        """
        Resolve the `specification` section of a repository configuration.

        Raises:
            ConfigurationError: If the section holds values of the wrong type.
        """
        section = _section((repo_config or {}).get("specification"))
        try:
            return cls.model_validate(section)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid specification configuration: {e}") from e


class RuleOutcome(BaseModel):
    """Result of a single condition evaluation."""

    model_config = ConfigDict(frozen=True)

    rule: str
    passed: bool
    failure_reason: str | None = None


class Verdict(BaseModel):
    """The single aggregated result reported as a commit status."""

    model_config = ConfigDict(frozen=True)

    succeeded: bool
    description: str

    def to_commit_status(self) -> dict[str, str]:
        return {
            "description": self.description,
            "state": "success" if self.succeeded else "failure",
            "context": STATUS_CONTEXT,
        }
