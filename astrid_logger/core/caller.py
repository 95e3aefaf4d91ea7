import inspect
import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent.parent


def resolve_caller_file() -> str:
    """Path of the first stack frame outside this package.

    Pseudo-files such as "<stdin>" are returned as-is.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            filename = frame.f_code.co_filename
            if filename.startswith("<"):
                return filename
            path = Path(filename).resolve()
            if PACKAGE_DIR not in path.parents:
                return str(path)
            frame = frame.f_back
    finally:
        del frame
    return "<unknown>"


def file_name(path: str) -> str:
    return os.path.basename(path)
