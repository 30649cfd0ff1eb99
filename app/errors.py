class UnknownSessionError(Exception):
    """The session token does not resolve to a logged-in user."""

    def __init__(self, session_id: str):
        super().__init__(f"unknown session id: {session_id}")
        self.session_id = session_id


class StoreError(Exception):
    """A row referenced by a VIP mutation does not exist."""


class InternalError(Exception):
    """The store transaction failed and has been rolled back."""


class AnnouncementError(Exception):
    """An ARP announcement could not be handed to the network."""
