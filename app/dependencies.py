from app.announcer import RedisAnnouncer
from app.auth.session import RedisSessionStore, SessionAuthorizer
from app.database import Database
from app.orchestrator import VIPOrchestrator
from redis_client import redis_client


def get_orchestrator() -> VIPOrchestrator:
    return VIPOrchestrator(Database(), RedisAnnouncer(redis_client))


def get_authorizer() -> SessionAuthorizer:
    return SessionAuthorizer(RedisSessionStore(redis_client))
