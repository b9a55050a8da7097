"""
Business logic for users.

Usernames and e‑mail addresses are unique across users.  The service
checks both before inserting or updating a record and raises
``DuplicateError`` on a clash, so the guarantee does not depend on
the caller remembering to look first.  Passwords are hashed before
they are stored.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from ..core.collection import Collection
from ..core.emails import normalize_email
from ..core.exceptions import DuplicateError
from ..core.security import hash_password
from ..schemas.user import User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Users keyed by id, with linear‑scan lookups by username and e‑mail."""

    def __init__(self) -> None:
        self.users: Collection[User] = Collection("user")

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda user: user.username == username)

    def get_user_by_email(self, email: str) -> Optional[User]:
        email = normalize_email(email)
        return self.users.find(lambda user: user.email == email)

    def create_user(self, data: UserCreate) -> User:
        """Register a new user.

        Raises ``DuplicateError`` if the username or e‑mail is taken.
        The stored ``password`` is the PBKDF2 hash of the submitted one.
        """
        self._ensure_unique(data.username, data.email)
        hashed = hash_password(data.password)
        now = datetime.now(timezone.utc)
        user = self.users.insert(
            lambda user_id: User(
                id=user_id,
                username=data.username,
                email=data.email,
                password=hashed,
                created_at=now,
            )
        )
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user

    def update_user(self, user_id: int, patch: UserUpdate) -> Optional[User]:
        """Apply the fields set on ``patch`` to an existing user.

        Returns ``None`` if the user does not exist.  Changing the
        username or e‑mail to one held by another user raises
        ``DuplicateError``.
        """
        if self.users.get(user_id) is None:
            logger.debug("Update of missing user %s ignored", user_id)
            return None
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        self._ensure_unique(changes.get("username"), changes.get("email"), exclude_id=user_id)
        if "password" in changes:
            changes["password"] = hash_password(changes["password"])
        user = self.users.merge(user_id, changes)
        logger.info("Updated user %s: %s", user_id, sorted(changes))
        return user

    def _ensure_unique(
        self,
        username: Optional[str],
        email: Optional[str],
        exclude_id: Optional[int] = None,
    ) -> None:
        if username is not None:
            existing = self.get_user_by_username(username)
            if existing is not None and existing.id != exclude_id:
                raise DuplicateError("username", username)
        if email is not None:
            existing = self.get_user_by_email(email)
            if existing is not None and existing.id != exclude_id:
                raise DuplicateError("email", email)
