"""Tests for visanav.onboarding: onboarding flow controller."""

from typing import Any

import pytest

from visanav.errors import OnboardingError
from visanav.onboarding import STEPS, OnboardingFlow


class _Recorder:
    def __init__(self, result: dict[str, Any] | None = None) -> None:
        self.result = result if result is not None else {"success": True, "scores": {"student": 80}}
        self.submitted: list[dict[str, Any]] = []
        self.completed: list[dict[str, Any]] = []
        self.skipped = 0

    async def complete_onboarding(self, data: dict[str, Any]) -> dict[str, Any]:
        self.submitted.append(data)
        return self.result

    def on_complete(self, payload: dict[str, Any]) -> None:
        self.completed.append(payload)

    def on_skip(self) -> None:
        self.skipped += 1

    def flow(self) -> OnboardingFlow:
        return OnboardingFlow(
            on_complete=self.on_complete,
            on_skip=self.on_skip,
            complete_onboarding=self.complete_onboarding,
        )


class TestSteps:
    def test_starts_at_personal(self) -> None:
        flow = _Recorder().flow()
        assert flow.step_id == "personal"
        assert flow.progress == 25.0

    def test_next_and_back(self) -> None:
        flow = _Recorder().flow()
        assert flow.back() is False
        for expected in STEPS[1:]:
            assert flow.next() is True
            assert flow.step_id == expected
        assert flow.is_last_step
        assert flow.next() is False
        assert flow.progress == 100.0
        assert flow.back() is True
        assert flow.step_id == "background"

    def test_update(self) -> None:
        flow = _Recorder().flow()
        flow.update("personal_info", "name", "Ada")
        assert flow.data["personal_info"]["name"] == "Ada"

    def test_update_unknown_section(self) -> None:
        with pytest.raises(KeyError):
            _Recorder().flow().update("payment", "card", "4242")

    def test_defaults_not_shared(self) -> None:
        first = _Recorder().flow()
        first.update("preferences", "language", "Welsh")
        assert _Recorder().flow().data["preferences"]["language"] == "English"

    def test_skip(self) -> None:
        recorder = _Recorder()
        recorder.flow().skip()
        assert recorder.skipped == 1
        assert recorder.submitted == []


class TestComplete:
    @pytest.mark.anyio
    async def test_success(self) -> None:
        recorder = _Recorder({"success": True, "scores": {"student": 80}, "profile": {"name": "Ada"}})
        flow = recorder.flow()
        flow.update("visa_goals", "primary_route", "student")
        payload = await flow.complete()
        assert recorder.submitted[0]["visa_goals"]["primary_route"] == "student"
        assert recorder.completed == [payload]
        assert payload["scores"] == {"student": 80}
        assert payload["profile"] == {"name": "Ada"}
        assert flow.loading is False
        assert flow.error is None

    @pytest.mark.anyio
    async def test_failure_keeps_state(self) -> None:
        recorder = _Recorder({"success": False, "error": "Service unavailable"})
        flow = recorder.flow()
        for _ in STEPS:
            flow.next()
        with pytest.raises(OnboardingError, match="Service unavailable"):
            await flow.complete()
        assert recorder.completed == []
        assert flow.error == "Service unavailable"
        assert flow.is_last_step
        assert flow.loading is False

    @pytest.mark.anyio
    async def test_failure_default_message(self) -> None:
        flow = _Recorder({"success": False}).flow()
        with pytest.raises(OnboardingError, match="Failed to complete onboarding"):
            await flow.complete()

    @pytest.mark.anyio
    async def test_sync_collaborator(self) -> None:
        completed: list[dict[str, Any]] = []
        flow = OnboardingFlow(
            on_complete=completed.append,
            on_skip=lambda: None,
            complete_onboarding=lambda data: {"success": True},
        )
        await flow.complete()
        assert len(completed) == 1
        assert completed[0]["scores"] is None

    @pytest.mark.anyio
    async def test_missing_collaborator(self) -> None:
        flow = OnboardingFlow(on_complete=lambda p: None, on_skip=lambda: None, complete_onboarding=None)
        with pytest.raises(OnboardingError):
            await flow.complete()

    @pytest.mark.anyio
    async def test_collaborator_raises(self) -> None:
        async def unreachable(data: dict[str, Any]) -> dict[str, Any]:
            raise ConnectionError("backend unreachable")

        completed: list[dict[str, Any]] = []
        flow = OnboardingFlow(
            on_complete=completed.append,
            on_skip=lambda: None,
            complete_onboarding=unreachable,
        )
        with pytest.raises(OnboardingError, match="backend unreachable") as info:
            await flow.complete()
        assert isinstance(info.value.__cause__, ConnectionError)
        assert flow.error == "backend unreachable"
        assert flow.loading is False
        assert completed == []

    @pytest.mark.anyio
    async def test_collaborator_raises_without_message(self) -> None:
        def unreachable(data: dict[str, Any]) -> dict[str, Any]:
            raise ConnectionError

        flow = OnboardingFlow(on_complete=lambda p: None, on_skip=lambda: None, complete_onboarding=unreachable)
        with pytest.raises(OnboardingError):
            await flow.complete()
        assert flow.error == "Failed to complete onboarding"
