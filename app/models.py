from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class IP(Base):
    __tablename__ = "ips"

    id = Column(Integer, primary_key=True, index=True)
    address = Column(String(45), unique=True, nullable=False)


# Hosts are registered by the host discovery side of the controller.
class Host(Base):
    __tablename__ = "hosts"

    id = Column(Integer, primary_key=True, index=True)
    ip_id = Column(Integer, ForeignKey("ips.id"), nullable=False)
    mac = Column(String(17), nullable=False)
    description = Column(String(255), nullable=False, default="")

    ip = relationship("IP")


class VIP(Base):
    __tablename__ = "vips"

    id = Column(Integer, primary_key=True, index=True)
    ip_id = Column(Integer, ForeignKey("ips.id"), unique=True, nullable=False)
    active_host_id = Column(Integer, ForeignKey("hosts.id"), nullable=False)
    standby_host_id = Column(Integer, ForeignKey("hosts.id"), nullable=False)
    description = Column(String(255), nullable=False, default="")

    ip = relationship("IP")
    active_host = relationship("Host", foreign_keys=[active_host_id])
    standby_host = relationship("Host", foreign_keys=[standby_host_id])


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    requester_id = Column(Integer, nullable=False, index=True)
    action = Column(String(32), nullable=False)
    vip_id = Column(Integer, nullable=False)
    detail = Column(String(512), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
