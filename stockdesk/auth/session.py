"""Authenticated-user context with an explicit signed_out/signed_in lifecycle.

The context is passed to consumers rather than held globally; consumers get a
read-only SessionSnapshot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from stockdesk.models.inventory import UserProfile, UserRole, UserStatus, to_native
from stockdesk.services.base_service import BaseService

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    SIGNED_OUT = "signed_out"
    SIGNED_IN = "signed_in"


@dataclass(frozen=True)
class SessionSnapshot:
    state: SessionState
    profile: Optional[UserProfile] = None

    @property
    def user_id(self) -> Optional[str]:
        return self.profile.user_id if self.profile else None


SessionListener = Callable[[str, SessionSnapshot], None]
ProfileLoader = Callable[[str], Optional[UserProfile]]


def _stored_role(user_id: str, value: Any) -> UserRole:
    try:
        return UserRole(value)
    except ValueError:
        logger.warning("Profile %s has unknown role %r, using viewer", user_id, value)
        return UserRole.VIEWER


def _stored_status(user_id: str, value: Any) -> UserStatus:
    if value is None:
        return UserStatus.ACTIVE
    try:
        return UserStatus(value)
    except ValueError:
        logger.warning("Profile %s has unknown status %r, using active", user_id, value)
        return UserStatus.ACTIVE


class ProfileRepository(BaseService):
    """Reads user profiles from the Profiles table."""

    def __init__(self, **kwargs: Any):
        super().__init__(service_name="ProfileRepository", **kwargs)

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        try:
            response = self.profiles_table.get_item(Key={"id": user_id})
        except (ClientError, BotoCoreError) as e:
            logger.error("Profile read error [%s]: %s", user_id, e)
            return None

        item = response.get("Item")
        if not item:
            return None
        item = to_native(item)
        return UserProfile(
            user_id=user_id,
            name=item.get("name", ""),
            email=item.get("email", ""),
            role=_stored_role(user_id, item.get("role")),
            status=_stored_status(user_id, item.get("status")),
            department=item.get("department"),
        )

    __call__ = get_profile


class SessionContext:
    def __init__(self) -> None:
        self._snapshot = SessionSnapshot(state=SessionState.SIGNED_OUT)
        self._listeners: list[SessionListener] = []

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def is_signed_in(self) -> bool:
        return self._snapshot.state is SessionState.SIGNED_IN

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Registers a listener; the returned callable unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: str) -> None:
        for listener in list(self._listeners):
            listener(event, self._snapshot)

    def sign_in(
        self,
        user_id: str,
        email: str,
        profile_loader: Optional[ProfileLoader] = None,
    ) -> SessionSnapshot:
        """Signs in with a provisional profile, replaced by the stored one if found."""
        if self.is_signed_in and self._snapshot.user_id == user_id:
            return self._snapshot

        profile = UserProfile(
            user_id=user_id,
            name=email.split("@")[0] if email else "User",
            email=email,
            role=UserRole.TECHNICIAN,
        )
        if profile_loader is not None:
            stored = profile_loader(user_id)
            if stored is not None:
                profile = stored

        self._snapshot = SessionSnapshot(state=SessionState.SIGNED_IN, profile=profile)
        logger.info("Signed in: %s (%s)", profile.user_id, profile.role.value)
        self._emit("signed_in")
        return self._snapshot

    def sign_out(self) -> SessionSnapshot:
        if not self.is_signed_in:
            return self._snapshot
        logger.info("Signed out: %s", self._snapshot.user_id)
        self._snapshot = SessionSnapshot(state=SessionState.SIGNED_OUT)
        self._emit("signed_out")
        return self._snapshot
