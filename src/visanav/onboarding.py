"""Onboarding flow controller.

Holds the state of the four-step onboarding wizard and drives the two
exits the navigator hands it: ``on_complete`` after a successful
``complete_onboarding`` call, and ``on_skip``.

Usage::

    decision = nav.render(auth_state, profile)      # page == "onboarding"
    flow = OnboardingFlow.from_props(decision.props)
    flow.update("personal_info", "name", "Ada")
    while flow.next():
        ...
    await flow.complete()                            # navigates to /visa-routes
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Mapping
from typing import Any

from visanav._internal.invoke import invoke
from visanav.errors import OnboardingError

logger = logging.getLogger("visanav.onboarding")

STEPS: tuple[str, ...] = ("personal", "goals", "background", "preferences")

# Section of the collected data each step edits
STEP_SECTIONS: dict[str, str] = {
    "personal": "personal_info",
    "goals": "visa_goals",
    "background": "background",
    "preferences": "preferences",
}

INITIAL_DATA: dict[str, dict[str, Any]] = {
    "personal_info": {"name": "", "country": "", "age": "", "profession": ""},
    "visa_goals": {
        "primary_route": "",
        "timeframe": "",
        "previous_applications": "",
        "specific_goals": "",
    },
    "background": {
        "education": "",
        "work_experience": "",
        "english_level": "",
        "family_ties": "",
        "specific_skills": [],
        "work_sector": "",
        "qualification_country": "",
    },
    "preferences": {
        "communication_style": "balanced",
        "priority": "accuracy",
        "notifications": True,
        "language": "English",
        "timezone": "UTC",
    },
}


class OnboardingFlow:
    """Step state plus the completion handshake."""

    __slots__ = (
        "_complete_onboarding",
        "_on_complete",
        "_on_skip",
        "data",
        "error",
        "loading",
        "step",
    )

    def __init__(
        self,
        *,
        on_complete: Callable[[dict[str, Any]], Any],
        on_skip: Callable[[], Any],
        complete_onboarding: Callable[[dict[str, Any]], Any] | None,
    ) -> None:
        self._on_complete = on_complete
        self._on_skip = on_skip
        self._complete_onboarding = complete_onboarding
        self.step = 0
        self.data: dict[str, dict[str, Any]] = copy.deepcopy(INITIAL_DATA)
        self.loading = False
        self.error: str | None = None

    @classmethod
    def from_props(cls, props: Mapping[str, Any]) -> OnboardingFlow:
        """Build a flow from the props of an ``onboarding`` render decision."""
        return cls(
            on_complete=props["on_complete"],
            on_skip=props["on_skip"],
            complete_onboarding=props.get("complete_onboarding"),
        )

    @property
    def step_id(self) -> str:
        return STEPS[self.step]

    @property
    def is_last_step(self) -> bool:
        return self.step == len(STEPS) - 1

    @property
    def progress(self) -> float:
        """Percentage of steps reached, including the current one."""
        return (self.step + 1) / len(STEPS) * 100

    def update(self, section: str, field: str, value: Any) -> None:
        if section not in self.data:
            msg = f"Unknown onboarding section {section!r}"
            raise KeyError(msg)
        self.data[section][field] = value

    def next(self) -> bool:
        """Advance one step. Returns ``False`` on the last step; call ``complete()`` there."""
        if self.is_last_step:
            return False
        self.step += 1
        return True

    def back(self) -> bool:
        if self.step == 0:
            return False
        self.step -= 1
        return True

    def skip(self) -> None:
        self._on_skip()

    async def complete(self) -> dict[str, Any]:
        """Submit the collected data, then hand the result to ``on_complete``.

        Raises ``OnboardingError`` when the backend reports failure or a
        collaborator raises; the flow keeps its data and step so the user
        can retry.
        """
        if self._complete_onboarding is None:
            raise OnboardingError("Onboarding is not available right now")

        self.loading = True
        self.error = None
        try:
            result = await invoke(self._complete_onboarding, copy.deepcopy(self.data))
            if not result or not result.get("success"):
                detail = (result or {}).get("error") or "Failed to complete onboarding"
                raise OnboardingError(detail)

            payload = {
                **self.data,
                "scores": result.get("scores"),
                "profile": result.get("profile"),
            }
            await invoke(self._on_complete, payload)
            return payload
        except OnboardingError as exc:
            logger.warning("Onboarding completion failed: %s", exc)
            self.error = str(exc)
            raise
        except Exception as exc:
            logger.warning("Onboarding completion failed: %r", exc)
            self.error = str(exc) or "Failed to complete onboarding"
            raise OnboardingError(self.error) from exc
        finally:
            self.loading = False
