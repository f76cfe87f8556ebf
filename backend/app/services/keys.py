from pathlib import PurePath
from uuid import uuid4


def extract_extension(filename: str | None) -> str:
    if not filename:
        return ""
    name = PurePath(filename.replace("\\", "/")).name
    _, dot, ext = name.rpartition(".")
    return ext if dot else ""


def generate_object_key(filename: str | None) -> str:
    """Return ``<uuid4>.<ext>``, or a bare ``<uuid4>`` when there is no extension."""
    ext = extract_extension(filename)
    return f"{uuid4()}.{ext}" if ext else str(uuid4())
