from typing import Optional


class TxGraphError(Exception):
    pass


class MissingParameter(TxGraphError):
    pass


class NoOutputs(TxGraphError):
    pass


class DataSourceError(TxGraphError):
    pass


class InvalidAddress(DataSourceError):
    pass


class InvalidCredential(DataSourceError):
    pass


class MalformedResponse(DataSourceError):
    pass


class ProviderError(DataSourceError):
    def __init__(self, message: str, status: Optional[int] = None, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body
