"""
Admin portal credential check.

A single fixed user (``admin``) with a password read from configuration at
startup. The password is passed in by the caller; this module never reads
the environment itself.
"""

import secrets
from typing import Optional

ADMIN_USERNAME = "admin"
ADMIN_GREETING = "Super secret admin portal"


class AdminPortal:
    """Checks HTTP Basic credentials against the configured admin password."""

    def __init__(self, password: str) -> None:
        self._password = password

    @property
    def enabled(self) -> bool:
        """An empty password locks everyone out."""
        return bool(self._password)

    def authenticate(self, username: Optional[str], password: Optional[str]) -> bool:
        if not self.enabled or username is None or password is None:
            return False
        # Compare both fields so timing doesn't reveal which one was wrong.
        user_ok = secrets.compare_digest(username.encode(), ADMIN_USERNAME.encode())
        pass_ok = secrets.compare_digest(password.encode(), self._password.encode())
        return user_ok and pass_ok
