"""VIP failover orchestration.

Every operation runs as exactly one store transaction. A mutation that
changed which host answers for an IP owes one ARP announcement, sent only
after its transaction committed. Announcement failures are logged and never
change the operation's outcome: the store is authoritative and has already
been updated by then.
"""
from dataclasses import dataclass
from typing import List, Optional, Union
from app import schemas
from app.announcer import NULL_MAC, Announcer
from app.database import Database
from app.errors import AnnouncementError
from app.logger import app_logger


@dataclass(frozen=True)
class Created:
    vip: schemas.VIP


@dataclass(frozen=True)
class Duplicated:
    ip_id: int


AddResult = Union[Created, Duplicated]


class VIPOrchestrator:
    def __init__(self, db: Database, announcer: Announcer):
        self.db = db
        self.announcer = announcer

    def list(self, requester_id: int, pagination: schemas.Pagination) -> List[schemas.VIP]:
        vips = self.db.exec(lambda tx: tx.vips(pagination))
        app_logger.debug(f"queried VIP list for requester {requester_id}: {len(vips)} records")
        return vips

    def add(
        self,
        requester_id: int,
        ip_id: int,
        active_host_id: int,
        standby_host_id: int,
        description: str,
    ) -> AddResult:
        vip, duplicated = self.db.exec(
            lambda tx: tx.add_vip(requester_id, ip_id, active_host_id, standby_host_id, description)
        )
        if duplicated:
            app_logger.debug(f"duplicated VIP: ip_id={ip_id}")
            return Duplicated(ip_id=ip_id)

        app_logger.debug(f"added a new VIP: {vip}")
        self._announce(vip.ip, vip.active_host.mac)
        return Created(vip=vip)

    def remove(self, requester_id: int, vip_id: int) -> Optional[schemas.VIP]:
        vip = self.db.exec(lambda tx: tx.remove_vip(requester_id, vip_id))
        if vip is None:
            return None

        app_logger.debug(f"removed the VIP: {vip}")
        self._announce(vip.ip, NULL_MAC)
        return vip

    def toggle(self, requester_id: int, vip_id: int) -> Optional[schemas.VIP]:
        vip = self.db.exec(lambda tx: tx.toggle_vip(requester_id, vip_id))
        if vip is None:
            return None

        app_logger.debug(f"toggled the VIP: {vip}")
        self._announce(vip.ip, vip.active_host.mac)
        return vip

    def _announce(self, ip: str, mac: str) -> bool:
        try:
            self.announcer.announce(ip, mac)
        except AnnouncementError as e:
            app_logger.error(f"failed to send ARP announcement: ip={ip}, mac={mac}: {e}")
            return False
        return True
