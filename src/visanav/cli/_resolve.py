"""``visanav resolve``: trace what a path renders.

Builds a navigator over an in-memory history, simulates the requested
session, renders once and prints the redirect chain followed by the page.
"""

import argparse

from visanav.auth import ANONYMOUS, AuthState, User, UserProfile
from visanav.config import NavConfig
from visanav.history import MemoryHistory
from visanav.navigator import Navigator

_CLI_USER = User(id="cli", email="cli@example.com", user_metadata={"name": "CLI"})


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.path`` and print the decision chain.

    Output::

        /admin
          -> /admin/login
        => admin-login
    """
    config = NavConfig(canonicalize_paths=not args.raw_paths)
    history = MemoryHistory()
    nav = Navigator(history, config=config)

    if args.admin:
        nav.on_admin_login({"id": "cli-admin"})

    start = len(history.entries)
    nav.navigate(args.path)

    auth_state = ANONYMOUS
    profile: UserProfile | None = None
    if args.authenticated or args.not_onboarded:
        auth_state = AuthState(user=_CLI_USER)
        profile = UserProfile(
            name="CLI",
            email=_CLI_USER.email,
            completed_onboarding=not args.not_onboarded,
        )

    decision = nav.render(auth_state, profile)

    chain = history.entries[start:]
    print(chain[0])
    for path in chain[1:]:
        print(f"  -> {path}")
    suffix = " (onboarding gate)" if decision.gated else ""
    params = f" {nav.route_params!r}" if nav.route_params else ""
    print(f"=> {decision.page}{params}{suffix}")
