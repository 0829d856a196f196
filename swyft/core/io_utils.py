import os
from datetime import datetime
from typing import List

SUPPORTED_EXTS = {".jpg",".jpeg",".png",".gif",".webp"}

def is_supported(name: str) -> bool:
    return os.path.splitext(name)[1].lower() in SUPPORTED_EXTS

def list_entries(folder: str) -> List[str]:
    """Names directly under folder, files and directories alike. Not recursive."""
    return sorted(os.listdir(folder))

def output_path_for(out_dir: str, name: str) -> str:
    return os.path.join(out_dir, os.path.basename(name))

def timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")
