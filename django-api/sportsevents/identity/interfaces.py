"""Identity provider interface.

The provider owns credentials and sessions. It hands out a Principal and
tells listeners whenever the signed-in principal changes.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from sportsevents.domain.models import Principal

AuthListener = Callable[[Principal | None], None]


class IdentityProvider(ABC):
    """Interface for authentication operations.

    Implementations raise AuthError for every failure.
    """

    def __init__(self) -> None:
        self._listeners: list[AuthListener] = []

    @abstractmethod
    def sign_up(self, email: str, password: str) -> Principal:
        """Create credentials and sign the new principal in."""
        ...

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Principal:
        ...

    @abstractmethod
    def sign_out(self) -> None:
        ...

    @abstractmethod
    def delete_account(self, principal: Principal) -> None:
        """Remove the credentials of ``principal``, signing it out if it is current."""
        ...

    @abstractmethod
    def current_principal(self) -> Principal | None:
        ...

    def on_auth_change(self, callback: AuthListener) -> Callable[[], None]:
        """Register ``callback`` and call it with the current principal.

        Returns a function that unregisters the callback.
        """
        self._listeners.append(callback)
        callback(self.current_principal())

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self, principal: Principal | None) -> None:
        for listener in list(self._listeners):
            listener(principal)
