"""Admin session stores: where ``AdminAuth`` lives.

The admin area has its own session, separate from the user's auth
state. Its presence is the only thing that decides between the admin
dashboard and the admin login page.

Two stores, picked by ``NavConfig.admin_session``:

- ``"memory"``: the payload lives on the navigator only. A page reload
  (a new navigator) signs the admin out.
- ``"signed"``: the payload is serialized as JSON, signed with
  ``itsdangerous`` and written to a host-supplied mapping (for example a
  bridge to ``sessionStorage``). Tampered or expired tokens are dropped.
  Payloads must be JSON-serializable.
"""

import logging
from collections.abc import MutableMapping
from typing import Any, Protocol

from itsdangerous import BadData, URLSafeTimedSerializer

from visanav.config import NavConfig
from visanav.errors import ConfigurationError

logger = logging.getLogger("visanav.admin")


class AdminSessionStore(Protocol):
    """Holds the opaque ``AdminAuth`` payload."""

    def get(self) -> Any | None: ...

    def set(self, payload: Any) -> None: ...

    def clear(self) -> None: ...


class MemoryAdminSession:
    """In-memory admin session. Gone when the navigator is."""

    __slots__ = ("_payload",)

    def __init__(self) -> None:
        self._payload: Any | None = None

    def get(self) -> Any | None:
        return self._payload

    def set(self, payload: Any) -> None:
        self._payload = payload

    def clear(self) -> None:
        self._payload = None


class SignedAdminSession:
    """Admin session persisted as a signed, time-limited token.

    Usage::

        storage: dict[str, str] = {}
        store = SignedAdminSession(storage, secret_key="s3cr3t")
        store.set({"id": "a1", "role": "admin"})
        SignedAdminSession(storage, secret_key="s3cr3t").get()  # survives "reload"
    """

    __slots__ = ("_key", "_max_age", "_serializer", "_storage")

    def __init__(
        self,
        storage: MutableMapping[str, str],
        *,
        secret_key: str,
        max_age: int = 8 * 3600,
        key: str = "visanav_admin",
    ) -> None:
        self._storage = storage
        self._serializer = URLSafeTimedSerializer(secret_key, salt="visanav.admin")
        self._max_age = max_age
        self._key = key

    def get(self) -> Any | None:
        token = self._storage.get(self._key)
        if not token:
            return None
        try:
            return self._serializer.loads(token, max_age=self._max_age)
        except BadData:
            logger.warning("Discarding invalid or expired admin session token")
            self._storage.pop(self._key, None)
            return None

    def set(self, payload: Any) -> None:
        try:
            token = self._serializer.dumps(payload)
        except (TypeError, ValueError) as exc:
            msg = f"Signed admin sessions need a JSON-serializable payload: {exc}"
            raise ConfigurationError(msg) from exc
        self._storage[self._key] = token

    def clear(self) -> None:
        self._storage.pop(self._key, None)


def admin_session_from_config(
    config: NavConfig,
    storage: MutableMapping[str, str] | None = None,
) -> AdminSessionStore:
    """Build the admin session store selected by *config*.

    ``"signed"`` without a *storage* mapping falls back to a private dict,
    which persists only for the life of this store.
    """
    if config.admin_session == "signed":
        return SignedAdminSession(
            storage if storage is not None else {},
            secret_key=config.secret_key,
            max_age=config.admin_session_max_age,
            key=config.admin_storage_key,
        )
    return MemoryAdminSession()
