"""Account registration, login and profile lookup."""

from collections.abc import Callable
from datetime import datetime

from sportsevents.domain.errors import StoreError, ValidationError
from sportsevents.domain.models import Principal, UserProfile
from sportsevents.domain.value_objects import utc_now
from sportsevents.identity.interfaces import IdentityProvider
from sportsevents.observability import LoggingObserver, Observer
from sportsevents.services.documents import profile_document, profile_from_document
from sportsevents.stores.interfaces import USERS, DocumentStore


class AuthService:
    """Ties identity-provider accounts to application profiles.

    The admin flag is chosen when the account is registered and is never
    changed afterwards.
    """

    def __init__(
        self,
        identity: IdentityProvider,
        store: DocumentStore,
        observer: Observer | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._identity = identity
        self._store = store
        self._observer = observer or LoggingObserver()
        self._clock = clock

    def register(
        self, email: str, password: str, display_name: str, is_admin: bool = False
    ) -> UserProfile:
        """Create an account and its profile.

        If the profile cannot be written the new account is removed again,
        so a failed registration can simply be retried.
        """
        with self._observer.failures(
            "User registration failed", "USER_REGISTER_FAILED", email=email
        ):
            errors = {}
            if not (email or "").strip():
                errors["email"] = "Email is required"
            if not password:
                errors["password"] = "Password is required"
            if not (display_name or "").strip():
                errors["display_name"] = "Display name is required"
            if errors:
                raise ValidationError(errors)

            self._observer.info("User registration attempt", "USER_REGISTER", email=email)
            principal = self._identity.sign_up(email, password)
            profile = UserProfile(
                uid=principal.uid,
                email=principal.email,
                display_name=display_name.strip(),
                is_admin=is_admin,
                created_at=self._clock(),
            )
            try:
                self._store.create(USERS, profile_document(profile))
            except StoreError:
                self._identity.delete_account(principal)
                raise
        self._observer.info(
            "User registration successful",
            "USER_REGISTER_SUCCESS",
            userId=profile.uid,
            email=profile.email,
            isAdmin=is_admin,
        )
        return profile

    def login(self, email: str, password: str) -> Principal:
        self._observer.info("User login attempt", "USER_LOGIN", email=email)
        with self._observer.failures("User login failed", "USER_LOGIN_FAILED", email=email):
            principal = self._identity.sign_in(email, password)
        self._observer.info(
            "User login successful", "USER_LOGIN_SUCCESS", userId=principal.uid, email=email
        )
        return principal

    def logout(self) -> None:
        principal = self._identity.current_principal()
        user_id = principal.uid if principal else None
        with self._observer.failures("User logout failed", "USER_LOGOUT_FAILED", userId=user_id):
            self._identity.sign_out()
        self._observer.info("User logout successful", "USER_LOGOUT_SUCCESS", userId=user_id)

    def get_profile(self, uid: str) -> UserProfile | None:
        with self._observer.failures(
            "Failed to fetch user profile", "FETCH_USER_PROFILE_FAILED", userId=uid
        ):
            rows = self._store.query(USERS, where={"uid": uid})
        if not rows:
            self._observer.warn(
                "User profile not found", "FETCH_USER_PROFILE_NOT_FOUND", userId=uid
            )
            return None
        return profile_from_document(rows[0][1])
