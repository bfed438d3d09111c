"""Identity provider backed by django.contrib.auth and the session."""

import logging

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, IntegrityError, transaction
from django.http import HttpRequest

from sportsevents.domain.errors import AuthError
from sportsevents.domain.models import Principal
from sportsevents.identity.interfaces import IdentityProvider

logger = logging.getLogger(__name__)


def principal_for(user) -> Principal:
    return Principal(uid=str(user.pk), email=user.email)


class DjangoIdentityProvider(IdentityProvider):
    """Signs principals in and out of the Django session of ``request``.

    The email address doubles as the username.
    """

    def __init__(self, request: HttpRequest) -> None:
        super().__init__()
        self._request = request

    def sign_up(self, email: str, password: str) -> Principal:
        email = email.strip().lower()
        User = get_user_model()
        try:
            validate_password(password)
        except DjangoValidationError as exc:
            raise AuthError(" ".join(exc.messages)) from exc
        try:
            with transaction.atomic():
                if User.objects.filter(username=email).exists():
                    raise AuthError("Email address is already in use")
                user = User.objects.create_user(username=email, email=email, password=password)
        except IntegrityError as exc:
            raise AuthError("Email address is already in use") from exc
        except DatabaseError as exc:
            logger.exception("Sign-up failed for %s", email)
            raise AuthError("Sign-up is unavailable, please try again") from exc
        login(self._request, user, backend="django.contrib.auth.backends.ModelBackend")
        principal = principal_for(user)
        self._notify(principal)
        return principal

    def sign_in(self, email: str, password: str) -> Principal:
        user = authenticate(self._request, username=email.strip().lower(), password=password)
        if user is None:
            raise AuthError("Invalid email or password")
        login(self._request, user)
        principal = principal_for(user)
        self._notify(principal)
        return principal

    def sign_out(self) -> None:
        logout(self._request)
        self._notify(None)

    def delete_account(self, principal: Principal) -> None:
        current = self.current_principal()
        signed_in = current is not None and current.uid == principal.uid
        if signed_in:
            logout(self._request)
        try:
            get_user_model().objects.filter(pk=principal.uid).delete()
        except DatabaseError as exc:
            logger.exception("Account removal failed for %s", principal.email)
            raise AuthError("Sign-up is unavailable, please try again") from exc
        if signed_in:
            self._notify(None)

    def current_principal(self) -> Principal | None:
        user = getattr(self._request, "user", None)
        if user is None or not user.is_authenticated:
            return None
        return principal_for(user)
