from pydantic import BaseModel, Field, model_validator

SESSION_ID_LENGTH = 64
DESCRIPTION_MAX_LENGTH = 255


class User(BaseModel):
    id: int = Field(..., description="The requester's unique identifier")
    name: str = Field("", description="The requester's login name")


class Pagination(BaseModel):
    offset: int = Field(0, ge=0, strict=True, description="Number of records to skip")
    limit: int = Field(..., gt=0, strict=True, description="Maximum number of records")


class Host(BaseModel):
    id: int = Field(..., description="The host's unique identifier")
    ip: str = Field(..., description="The host's own IP address")
    mac: str = Field(..., description="The host's hardware address")
    description: str = Field("", description="Free-form note about the host")


class VIP(BaseModel):
    id: int = Field(..., description="The VIP's unique identifier")
    ip: str = Field(..., description="The virtual IP address")
    active_host: Host = Field(..., description="Host serving traffic for the IP")
    standby_host: Host = Field(..., description="Host ready to take over")
    description: str = Field("", description="Free-form note about the VIP")


class SessionRequest(BaseModel):
    session_id: str = Field(
        ...,
        min_length=SESSION_ID_LENGTH,
        max_length=SESSION_ID_LENGTH,
        description="The caller's session token",
    )


class ListVIPRequest(SessionRequest):
    pagination: Pagination


class AddVIPRequest(SessionRequest):
    ip_id: int = Field(..., ge=0, strict=True, description="The IP resource to bind")
    active_host_id: int = Field(..., gt=0, strict=True, description="Initial active host")
    standby_host_id: int = Field(..., gt=0, strict=True, description="Initial standby host")
    description: str = Field("", max_length=DESCRIPTION_MAX_LENGTH)

    @model_validator(mode="after")
    def check_distinct_hosts(self) -> "AddVIPRequest":
        if self.active_host_id == self.standby_host_id:
            raise ValueError("same host for the active and standby")
        return self


class RemoveVIPRequest(SessionRequest):
    id: int = Field(..., gt=0, strict=True, description="The VIP to remove")


class ToggleVIPRequest(SessionRequest):
    id: int = Field(..., gt=0, strict=True, description="The VIP to fail over")

