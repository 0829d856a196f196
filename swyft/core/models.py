from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

class Outcome(str, Enum):
    RESIZED = "resized"
    SKIPPED_EXISTS = "skipped_exists"
    SKIPPED_UNSUPPORTED = "skipped_unsupported"
    ABORTED_NO_METADATA = "aborted_no_metadata"
    FAILED = "failed"

@dataclass(frozen=True)
class ResizeRequest:
    input_path: str
    output_path: str
    width: Optional[int]=None
    height: Optional[int]=None
    keep_aspect: bool=False

@dataclass(frozen=True)
class BatchRequest:
    input_folder: str
    output_folder: str
    width: Optional[int]=None
    height: Optional[int]=None
    keep_aspect: bool=False
    overwrite: bool=False
    max_workers: Optional[int]=None

    def for_file(self, input_path: str, output_path: str) -> ResizeRequest:
        return ResizeRequest(input_path, output_path, self.width, self.height, self.keep_aspect)

@dataclass
class ResizeResult:
    src_path: str
    dst_path: Optional[str]
    outcome: Outcome
    error: Optional[str] = None
    in_size: Optional[Tuple[int, int]] = None
    out_size: Optional[Tuple[int, int]] = None

    @property
    def ok(self) -> bool:
        return self.outcome is not Outcome.FAILED

@dataclass
class BatchSummary:
    results: List[ResizeResult] = field(default_factory=list)
    elapsed: float = 0.0

    def count(self, outcome: Outcome) -> int:
        return sum(1 for r in self.results if r.outcome is outcome)

    @property
    def failed(self) -> List[ResizeResult]:
        return [r for r in self.results if r.outcome is Outcome.FAILED]

    @property
    def ok(self) -> bool:
        return not self.failed
