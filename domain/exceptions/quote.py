class QuoteException(Exception):
    pass


class ProviderUnavailable(QuoteException):
    def __init__(self, provider: str, reason: str):
        super().__init__(f"{provider} unavailable: {reason}")
        self.provider = provider
        self.reason = reason


class NoQuotesAvailable(QuoteException):
    pass


class InvalidDirection(QuoteException):
    pass


class OrderRejected(QuoteException):
    pass


class CacheError(QuoteException):
    pass


class InvalidTransfer(QuoteException):
    pass


class TransferFailed(QuoteException):
    pass
