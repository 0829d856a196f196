from .models import BatchRequest, BatchSummary, Outcome, ResizeRequest, ResizeResult
from .io_utils import SUPPORTED_EXTS, list_entries
from .backend import PillowBackend
from .resize_service import calc_target_size, resize_one
from .batch_service import run_batch

__all__ = [
    "BatchRequest",
    "BatchSummary",
    "Outcome",
    "ResizeRequest",
    "ResizeResult",
    "SUPPORTED_EXTS",
    "list_entries",
    "PillowBackend",
    "calc_target_size",
    "resize_one",
    "run_batch"
]
