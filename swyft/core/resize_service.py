import logging
from typing import Optional, Tuple

from .backend import ImageBackend, PillowBackend, scale_side
from .errors import SwyftError
from .io_utils import timestamp
from .models import Outcome, ResizeRequest, ResizeResult

logger = logging.getLogger(__name__)

def calc_target_size(sw:int, sh:int, width:Optional[int], height:Optional[int],
                     keep_aspect:bool) -> Tuple[Optional[int], Optional[int]]:
    """Resolve the (width, height) handed to the resize primitive.

    With keep_aspect and a single dimension the other one is derived from the
    source ratio. Both dimensions given are used as they are, even when their
    ratio differs from the source. Without keep_aspect nothing is derived.
    """
    if keep_aspect:
        if width and not height: return width, scale_side(width, sw, sh)
        if height and not width: return scale_side(height, sh, sw), height
    return width, height

def resize_one(req: ResizeRequest, backend: Optional[ImageBackend]=None) -> ResizeResult:
    backend = backend or PillowBackend()
    try:
        im = backend.open(req.input_path)
        try:
            sw, sh = im.metadata()
            if req.keep_aspect and not (sw and sh):
                logger.warning("[%s] Cannot preserve aspect ratio without width and height metadata: %s",
                               timestamp(), req.input_path)
                return ResizeResult(req.input_path, None, Outcome.ABORTED_NO_METADATA)

            tw, th = calc_target_size(sw, sh, req.width, req.height, req.keep_aspect)
            logger.debug("%s (%sx%s) -> (%sx%s)", req.input_path, sw, sh, tw, th)
            out = im.resize(tw, th)
            try:
                out.write_to(req.output_path)
                out_size = out.metadata()
            finally:
                if out is not im: out.close()
        finally:
            im.close()
    except SwyftError as e:
        logger.error("[%s] Error resizing %s: %s", timestamp(), req.input_path, e)
        return ResizeResult(req.input_path, None, Outcome.FAILED, str(e))
    except Exception as e:
        # whatever the backend throws stays local to this file
        logger.error("[%s] Error resizing %s: %s", timestamp(), req.input_path, e,
                     exc_info=logger.isEnabledFor(logging.DEBUG))
        return ResizeResult(req.input_path, None, Outcome.FAILED, str(e) or type(e).__name__)

    logger.info("[%s] Resized: %s -> %s", timestamp(), req.input_path, req.output_path)
    return ResizeResult(req.input_path, req.output_path, Outcome.RESIZED, None, (sw, sh), out_size)
