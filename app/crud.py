from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app import models, schemas
from app.errors import StoreError


class VIPTransaction(ABC):
    @abstractmethod
    def vips(self, pagination: schemas.Pagination) -> List[schemas.VIP]:
        ...

    @abstractmethod
    def add_vip(
        self,
        requester_id: int,
        ip_id: int,
        active_id: int,
        standby_id: int,
        description: str,
    ) -> Tuple[Optional[schemas.VIP], bool]:
        """Returns the new VIP and False, or None and True when ip_id is already bound."""

    @abstractmethod
    def remove_vip(self, requester_id: int, vip_id: int) -> Optional[schemas.VIP]:
        """Removes a VIP and returns it as it was before removal, or None if it does not exist."""

    @abstractmethod
    def toggle_vip(self, requester_id: int, vip_id: int) -> Optional[schemas.VIP]:
        """Swaps the active and standby hosts of a VIP and returns it, or None if it does not exist."""


def to_host(host: models.Host) -> schemas.Host:
    return schemas.Host(
        id=host.id,
        ip=host.ip.address,
        mac=host.mac,
        description=host.description or "",
    )


def to_vip(vip: models.VIP) -> schemas.VIP:
    return schemas.VIP(
        id=vip.id,
        ip=vip.ip.address,
        active_host=to_host(vip.active_host),
        standby_host=to_host(vip.standby_host),
        description=vip.description or "",
    )


class SQLTransaction(VIPTransaction):
    def __init__(self, db: Session):
        self.db = db

    def vips(self, pagination: schemas.Pagination) -> List[schemas.VIP]:
        rows = (
            self.db.query(models.VIP)
            .order_by(models.VIP.id.desc())
            .offset(pagination.offset)
            .limit(pagination.limit)
            .all()
        )
        return [to_vip(row) for row in rows]

    def add_vip(
        self,
        requester_id: int,
        ip_id: int,
        active_id: int,
        standby_id: int,
        description: str,
    ) -> Tuple[Optional[schemas.VIP], bool]:
        if self._get_vip_by_ip(ip_id) is not None:
            return None, True

        if self.db.get(models.IP, ip_id) is None:
            raise StoreError(f"unknown ip: id={ip_id}")
        for host_id in (active_id, standby_id):
            if self.db.get(models.Host, host_id) is None:
                raise StoreError(f"unknown host: id={host_id}")

        vip = models.VIP(
            ip_id=ip_id,
            active_host_id=active_id,
            standby_host_id=standby_id,
            description=description,
        )
        self.db.add(vip)
        try:
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            # Only a concurrent add that bound the same IP first is a duplicate.
            if self._get_vip_by_ip(ip_id) is not None:
                return None, True
            raise

        self.db.refresh(vip)
        self._audit(requester_id, "add_vip", vip.id, f"ip_id={ip_id}, active={active_id}, standby={standby_id}")
        return to_vip(vip), False

    def remove_vip(self, requester_id: int, vip_id: int) -> Optional[schemas.VIP]:
        vip = self._get_vip(vip_id)
        if vip is None:
            return None

        snapshot = to_vip(vip)
        self.db.delete(vip)
        self.db.flush()
        self._audit(requester_id, "remove_vip", snapshot.id, f"ip={snapshot.ip}")
        return snapshot

    def toggle_vip(self, requester_id: int, vip_id: int) -> Optional[schemas.VIP]:
        vip = self._get_vip(vip_id)
        if vip is None:
            return None

        vip.active_host_id, vip.standby_host_id = vip.standby_host_id, vip.active_host_id
        self.db.flush()
        self.db.refresh(vip)
        self._audit(requester_id, "toggle_vip", vip.id, f"active={vip.active_host_id}, standby={vip.standby_host_id}")
        return to_vip(vip)

    def _get_vip(self, vip_id: int) -> Optional[models.VIP]:
        return (
            self.db.query(models.VIP)
            .filter(models.VIP.id == vip_id)
            .with_for_update()
            .first()
        )

    def _get_vip_by_ip(self, ip_id: int) -> Optional[models.VIP]:
        return (
            self.db.query(models.VIP)
            .filter(models.VIP.ip_id == ip_id)
            .with_for_update()
            .first()
        )

    def _audit(self, requester_id: int, action: str, vip_id: int, detail: str) -> None:
        self.db.add(
            models.AuditLog(
                requester_id=requester_id,
                action=action,
                vip_id=vip_id,
                detail=detail,
            )
        )
