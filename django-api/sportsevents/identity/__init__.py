from sportsevents.identity.interfaces import AuthListener, IdentityProvider

__all__ = ["AuthListener", "IdentityProvider"]
