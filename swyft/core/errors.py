class SwyftError(Exception):
    """Base class for every error swyft raises on purpose."""

class InputNotFound(SwyftError):
    def __init__(self, folder: str):
        super().__init__(f"Input folder does not exist: {folder}")
        self.folder = folder

class EmptyInput(SwyftError):
    def __init__(self, folder: str):
        super().__init__("No images found in the input folder.")
        self.folder = folder

class InputUnreadable(SwyftError):
    def __init__(self, folder: str, reason: str):
        super().__init__(f"Cannot read input folder {folder}: {reason}")
        self.folder = folder

class OutputUnavailable(SwyftError):
    def __init__(self, folder: str, reason: str):
        super().__init__(f"Cannot create output folder {folder}: {reason}")
        self.folder = folder

class ValidationError(SwyftError):
    pass

# per-file errors, raised by the image backend

class DecodeError(SwyftError):
    pass

class ResizeError(SwyftError):
    pass

class WriteError(SwyftError):
    pass
