import json
from abc import ABC, abstractmethod
from typing import Optional
from pydantic import ValidationError
import redis
from redis.client import Redis
from app import schemas
from app.errors import InternalError, UnknownSessionError
from app.logger import app_logger
from config import SESSION_KEY_PREFIX


class SessionStore(ABC):
    @abstractmethod
    def get(self, session_id: str) -> Optional[schemas.User]:
        """Returns the user logged in under session_id, or None."""


class RedisSessionStore(SessionStore):
    """Session records written by the login service as JSON strings."""

    def __init__(self, client: Redis, prefix: str = SESSION_KEY_PREFIX):
        self.client = client
        self.prefix = prefix

    def get(self, session_id: str) -> Optional[schemas.User]:
        try:
            raw = self.client.get(f"{self.prefix}{session_id}")
        except redis.RedisError as e:
            app_logger.error(f"failed to query session {session_id}: {e}")
            raise InternalError(f"session store unavailable: {e}") from e

        if raw is None:
            return None

        try:
            return schemas.User.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            app_logger.warning(f"malformed session record {session_id}: {e}")
            return None


class SessionAuthorizer:
    def __init__(self, store: SessionStore):
        self.store = store

    def resolve(self, session_id: str) -> schemas.User:
        user = self.store.get(session_id)
        if user is None:
            raise UnknownSessionError(session_id)
        return user
