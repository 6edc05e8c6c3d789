class UpRoomError(Exception):
    """Base class for application errors."""


class StoreUnavailableError(UpRoomError):
    """The record store could not answer a lookup.

    Raised by store adapters for network or infrastructure faults. Callers
    must treat it as "unknown", never as "not found".
    """

    def __init__(self, message, subdomain=None):
        super().__init__(message)
        self.subdomain = subdomain
