import json
from abc import ABC, abstractmethod
import redis
from redis.client import Redis
from app.errors import AnnouncementError
from app.logger import app_logger
from config import ANNOUNCE_CHANNEL

# Announced when no host answers for an IP any more.
NULL_MAC = "00:00:00:00:00:00"


class Announcer(ABC):
    @abstractmethod
    def announce(self, ip: str, mac: str) -> None:
        """Tells the network that mac now answers for ip.

        Raises AnnouncementError when the announcement could not be sent.
        """


class RedisAnnouncer(Announcer):
    """Hands announcements to the flow controller over Redis pub/sub.

    The controller owns the switches and emits the gratuitous ARP on every
    edge port, so this side only publishes the IP to MAC binding.
    """

    def __init__(self, client: Redis, channel: str = ANNOUNCE_CHANNEL):
        self.client = client
        self.channel = channel

    def announce(self, ip: str, mac: str) -> None:
        message = json.dumps({"ip": ip, "mac": mac})
        try:
            receivers = self.client.publish(self.channel, message)
        except redis.RedisError as e:
            raise AnnouncementError(f"failed to publish on {self.channel}: {e}") from e

        if receivers == 0:
            app_logger.warning(f"no flow controller listening on {self.channel}: ip={ip}, mac={mac}")
        else:
            app_logger.debug(f"sent ARP announcement: ip={ip}, mac={mac}")
