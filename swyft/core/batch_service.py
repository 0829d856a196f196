import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

from .backend import ImageBackend, PillowBackend
from .errors import EmptyInput, InputNotFound, InputUnreadable, OutputUnavailable
from .io_utils import is_supported, list_entries, output_path_for, timestamp
from .models import BatchRequest, BatchSummary, Outcome, ResizeResult
from .resize_service import resize_one

logger = logging.getLogger(__name__)
LogCb = Callable[[str], None]

def _describe(res: ResizeResult) -> str:
    name = os.path.basename(res.src_path)
    if res.outcome is Outcome.RESIZED: return f"Resized: {res.src_path} -> {res.dst_path}"
    if res.outcome is Outcome.SKIPPED_EXISTS: return f"Skipped: {name} (File already exists, skipping.)"
    if res.outcome is Outcome.SKIPPED_UNSUPPORTED: return f"Skipped: {name} (Unsupported format)"
    if res.outcome is Outcome.ABORTED_NO_METADATA: return f"Skipped: {name} (No width/height metadata)"
    return f"Error resizing {res.src_path}: {res.error}"

def run_batch(req: BatchRequest, backend: Optional[ImageBackend]=None,
              log: Optional[LogCb]=None) -> BatchSummary:
    """Resize every supported file directly under req.input_folder.

    Directory-level problems raise before any file is touched. Per-file
    failures come back as FAILED results and never stop the sibling tasks.
    """
    if not os.path.exists(req.input_folder):
        raise InputNotFound(req.input_folder)
    if not os.path.isdir(req.input_folder):
        raise InputUnreadable(req.input_folder, "not a folder")
    try:
        names = list_entries(req.input_folder)
    except OSError as e:
        raise InputUnreadable(req.input_folder, e.strerror or str(e)) from e
    if not names:
        raise EmptyInput(req.input_folder)
    try:
        os.makedirs(req.output_folder, exist_ok=True)
    except OSError as e:
        raise OutputUnavailable(req.output_folder, e.strerror or str(e)) from e
    backend = backend or PillowBackend()

    # None keeps a slot for a file still waiting on the pool
    slots: List[Optional[ResizeResult]] = []
    todo = []
    for name in names:
        src = os.path.join(req.input_folder, name)
        if not is_supported(name):
            logger.info("[%s] Skipped: %s (Unsupported format)", timestamp(), name)
            slots.append(ResizeResult(src, None, Outcome.SKIPPED_UNSUPPORTED))
            continue
        dst = output_path_for(req.output_folder, name)
        if os.path.exists(dst) and not req.overwrite:
            logger.info("[%s] Skipped: %s (File already exists, skipping.)", timestamp(), name)
            slots.append(ResizeResult(src, dst, Outcome.SKIPPED_EXISTS))
            continue
        todo.append((len(slots), req.for_file(src, dst)))
        slots.append(None)

    started = time.perf_counter()
    with ThreadPoolExecutor(max_workers=req.max_workers) as pool:
        futures = [(i, pool.submit(resize_one, r, backend)) for i, r in todo]
        for i, fut in futures:
            slots[i] = fut.result()
    summary = BatchSummary([r for r in slots if r is not None], time.perf_counter()-started)

    if log:
        for res in summary.results: log(_describe(res))

    logger.info("Processing time: %.3fs", summary.elapsed)
    if summary.ok:
        logger.info("All images processed successfully.")
    else:
        logger.error("%d image(s) failed.", len(summary.failed))
    return summary
