"""Auth and profile records the navigator reads but never owns.

Both are produced by the host's session hook and handed to the navigator
on every render. ``is_authenticated`` is derived from ``user`` presence,
never stored separately.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class User:
    """Identity record from the auth provider."""

    id: str
    email: str
    user_metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return str(self.user_metadata.get("name") or self.email)


@dataclass(frozen=True, slots=True)
class AuthState:
    """Session state owned by the host's auth hook.

    ``session`` is forwarded to pages untouched.
    """

    user: User | None = None
    is_loading: bool = False
    session: Any = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


ANONYMOUS = AuthState()
LOADING = AuthState(is_loading=True)


@dataclass(frozen=True, slots=True)
class UserProfile:
    """Profile row for the signed-in user.

    ``completed_onboarding`` is the only field the navigator reads. Any
    other column lands in ``extra`` and is reachable by item access::

        profile = UserProfile.from_mapping(row)
        profile["has_used_trial"]
    """

    name: str = ""
    email: str = ""
    completed_onboarding: bool = False
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> UserProfile:
        extra = {
            k: v for k, v in data.items() if k not in ("name", "email", "completed_onboarding")
        }
        return cls(
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            completed_onboarding=bool(data.get("completed_onboarding", False)),
            extra=extra,
        )

    def __getitem__(self, key: str) -> Any:
        if key in ("name", "email", "completed_onboarding"):
            return getattr(self, key)
        return self.extra[key]

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default
