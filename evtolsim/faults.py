"""Recording of fault codes raised during a simulation."""

from __future__ import annotations

import sys
from typing import NamedTuple, Optional, TextIO


class FaultRecord(NamedTuple):
    evtol_id: int
    fault_code: int


class FaultManager:
    """Keeps every fault in the order it was recorded."""

    def __init__(self) -> None:
        self._faults: list[FaultRecord] = []

    def record_fault(self, evtol_id: int, fault_code: int) -> None:
        self._faults.append(FaultRecord(evtol_id, fault_code))

    def faults(self) -> tuple[FaultRecord, ...]:
        """All recorded faults, oldest first."""
        return tuple(self._faults)

    def report(self, file: Optional[TextIO] = None) -> None:
        out = file if file is not None else sys.stdout
        out.write("\n--- Fault Report ---\n")
        for record in self._faults:
            out.write(f"EVTOL {record.evtol_id} Fault Code: {record.fault_code}\n")