"""Role router.

Decides which view a principal may see. Anonymous visitors are limited to
the public views; signed-in admins always land on ``admin`` and everyone
else on ``events``. A request for a view the principal may not see is
redirected, never rejected.

The router is a pure state machine: ``transition(state, event)`` returns the
next state and is re-run on every navigation and every auth change.
"""

from dataclasses import dataclass, replace
from enum import Enum

from sportsevents.domain.models import UserProfile


class View(Enum):
    HOME = "home"
    LOGIN = "login"
    ADMIN_LOGIN = "admin-login"
    REGISTER = "register"
    EVENTS = "events"
    ADMIN = "admin"


PUBLIC_VIEWS = frozenset({View.HOME, View.LOGIN, View.ADMIN_LOGIN, View.REGISTER})


def resolve_view(authenticated: bool, is_admin: bool, requested: View) -> View:
    if not authenticated:
        return requested if requested in PUBLIC_VIEWS else View.HOME
    return View.ADMIN if is_admin else View.EVENTS


@dataclass(frozen=True)
class RouterState:
    authenticated: bool = False
    is_admin: bool = False
    view: View = View.HOME


@dataclass(frozen=True)
class Navigate:
    view: View


@dataclass(frozen=True)
class AuthChanged:
    """Sign-in, sign-out or profile load. ``profile`` is None when signed out.

    A signed-in principal whose profile has not loaded is treated as a
    regular user.
    """

    authenticated: bool
    profile: UserProfile | None = None


RouterEvent = Navigate | AuthChanged

INITIAL_STATE = RouterState()


def transition(state: RouterState, event: RouterEvent) -> RouterState:
    if isinstance(event, Navigate):
        requested = event.view
    elif isinstance(event, AuthChanged):
        state = replace(
            state,
            authenticated=event.authenticated,
            is_admin=bool(event.authenticated and event.profile and event.profile.is_admin),
        )
        requested = state.view
    else:
        raise TypeError(f"Unsupported router event: {event!r}")
    return replace(
        state, view=resolve_view(state.authenticated, state.is_admin, requested)
    )
