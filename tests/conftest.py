"""Shared fixtures for visanav tests."""

import pytest

from visanav.auth import AuthState, User, UserProfile
from visanav.events import NavigationEvent, set_navigation_event_sink
from visanav.history import MemoryHistory
from visanav.navigator import Navigator


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def user() -> User:
    return User(id="u-1", email="ada@example.com", user_metadata={"name": "Ada"})


@pytest.fixture
def signed_in(user: User) -> AuthState:
    return AuthState(user=user, session={"access_token": "tok"})


@pytest.fixture
def onboarded() -> UserProfile:
    return UserProfile(name="Ada", email="ada@example.com", completed_onboarding=True)


@pytest.fixture
def not_onboarded() -> UserProfile:
    return UserProfile(name="Ada", email="ada@example.com", completed_onboarding=False)


@pytest.fixture
def history() -> MemoryHistory:
    return MemoryHistory("/")


@pytest.fixture
def nav(history: MemoryHistory):
    with Navigator(history) as navigator:
        yield navigator


@pytest.fixture
def events():
    received: list[NavigationEvent] = []
    set_navigation_event_sink(received.append)
    yield received
    set_navigation_event_sink(None)
