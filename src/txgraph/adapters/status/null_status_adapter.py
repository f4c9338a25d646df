from txgraph.core.enums import Phase
from txgraph.ports.status_port import StatusPort


class NullStatusAdapter(StatusPort):
    def report_phase(self, phase: Phase) -> None:
        pass

    def report_progress(self, message: str) -> None:
        pass

    def report_error(self, message: str) -> None:
        pass
