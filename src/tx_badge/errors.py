"""Errors raised while producing translation statistics."""


class TxBadgeError(Exception):
    """Base class; the HTTP layer turns any of these into a 500."""


class TransportError(TxBadgeError):
    pass


class UpstreamStatusError(TxBadgeError):
    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Transifex API return: {status_code} {reason}")


class ParseError(TxBadgeError):
    pass


class CacheCoordinationError(TxBadgeError):
    pass
