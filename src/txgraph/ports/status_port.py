from __future__ import annotations

from abc import ABC, abstractmethod

from txgraph.core.enums import Phase


class StatusPort(ABC):

    @abstractmethod
    def report_phase(self, phase: Phase) -> None:
        raise NotImplementedError

    @abstractmethod
    def report_progress(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def report_error(self, message: str) -> None:
        raise NotImplementedError
