"""Access gates: decisions made before a page is rendered.

``onboarding_required`` is the router-level gate: an authenticated user
whose profile has not completed onboarding sees the onboarding flow on
every path except the onboarding page itself and the admin area.

``subscription_access`` is the feature-level gate used by pages that sit
behind a paid plan.
"""

from dataclasses import dataclass
from enum import StrEnum

from visanav.auth import AuthState, UserProfile
from visanav.config import NavConfig


def is_admin_path(path: str, config: NavConfig) -> bool:
    return path.startswith(config.admin_prefix)


def onboarding_required(
    path: str,
    auth_state: AuthState,
    user_profile: UserProfile | None,
    config: NavConfig,
) -> bool:
    """Return ``True`` when *path* must render the onboarding flow instead.

    Rules, in order:

    1. Admin paths never override.
    2. Authenticated + profile loaded + onboarding incomplete, on any path
       other than the onboarding page: override.
    3. Otherwise no override.
    """
    if is_admin_path(path, config):
        return False
    return (
        auth_state.is_authenticated
        and user_profile is not None
        and not user_profile.completed_onboarding
        and path != config.onboarding_path
    )


# ---------------------------------------------------------------------------
# Subscription access
# ---------------------------------------------------------------------------

ACTIVE_STATUSES = frozenset({"trial", "active"})


class Access(StrEnum):
    GRANTED = "granted"
    TRIAL_EXPIRED = "trial_expired"
    REQUIRED = "required"


@dataclass(frozen=True, slots=True)
class Subscription:
    """Subscription record as returned by the billing backend."""

    status: str
    days_remaining: int | None = None
    trial_end: str | None = None
    current_period_end: str | None = None
    is_expired: bool = False


@dataclass(frozen=True, slots=True)
class SubscriptionAccess:
    access: Access
    offer_trial: bool = False

    @property
    def granted(self) -> bool:
        return self.access is Access.GRANTED


def subscription_access(
    has_active_subscription: bool,
    subscription: Subscription | None,
    user_profile: UserProfile | None,
) -> SubscriptionAccess:
    """Decide whether a subscription-guarded feature is available.

    An expired trial is reported separately so the page can say so; any
    other non-granted state offers the free trial unless the profile
    records ``has_used_trial``.
    """
    if (
        has_active_subscription
        and subscription is not None
        and subscription.status in ACTIVE_STATUSES
        and not subscription.is_expired
    ):
        return SubscriptionAccess(Access.GRANTED)

    if subscription is not None and subscription.status == "trial" and subscription.is_expired:
        return SubscriptionAccess(Access.TRIAL_EXPIRED)

    used_trial = bool(user_profile.get("has_used_trial")) if user_profile is not None else False
    return SubscriptionAccess(Access.REQUIRED, offer_trial=not used_trial)
