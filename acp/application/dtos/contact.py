"""DTOs for contact preference use cases."""

from dataclasses import dataclass

from acp.application.dtos.user import UserResult
from acp.domain.preferences import ContactDiff


@dataclass(frozen=True)
class TopicResult:
    """Topic read-model."""

    id: str
    name: str
    description: str | None


@dataclass(frozen=True)
class PreferenceForm:
    """Data for the preference edit screen: every topic x mode, pre-filled."""

    user: UserResult
    push_key: str | None
    topics: tuple[TopicResult, ...]
    matrix: dict[str, dict[str, bool]]


@dataclass(frozen=True)
class ReconcileResult:
    """Applied writes and the saved profile."""

    user: UserResult
    push_key: str | None
    diff: ContactDiff
