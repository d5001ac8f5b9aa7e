import base64
import logging
import os
import re
import uuid
from dataclasses import dataclass

import anyio

from services.errors import StorageError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class StagedFile:
    original_name: str
    path: str


def sanitize_filename(filename: str) -> str:
    base = os.path.basename(filename.replace("\\", "/"))
    safe = re.sub(r"[^a-zA-Z0-9_.-]", "_", base).lstrip(".")
    return safe or "upload"


def display_name(filename, fallback: str) -> str:
    """
    Name shown to the email recipient: the uploaded filename without any
    client-side directory, or `fallback` when the client sent none.
    """
    if not filename:
        return fallback
    base = os.path.basename(filename.replace("\\", "/")).strip()
    return base or fallback


def ensure_upload_dir(directory: str) -> None:
    os.makedirs(directory, exist_ok=True)


async def stage_upload(upload, directory: str, fallback_name: str) -> StagedFile:
    """
    Copy an uploaded file into the staging directory under a unique name.

    The on-disk name is a random uuid4 token followed by the sanitized
    original filename, so concurrent requests never share a path. A partially
    written file is removed before StorageError is raised.
    """
    original = display_name(upload.filename, fallback_name)
    path = os.path.join(directory, f"{uuid.uuid4().hex}-{sanitize_filename(original)}")

    try:
        async with await anyio.open_file(path, "wb") as out:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                await out.write(chunk)
    except OSError as exc:
        await remove_staged_path(path)
        raise StorageError(f"Could not stage upload {original!r}: {exc}") from exc

    logger.debug("Staged %s at %s", original, path)
    return StagedFile(original_name=original, path=path)


async def read_as_base64(staged: StagedFile) -> str:
    try:
        data = await anyio.Path(staged.path).read_bytes()
    except OSError as exc:
        raise StorageError(f"Could not read staged file {staged.path}: {exc}") from exc
    return base64.b64encode(data).decode("ascii")


async def remove_staged_path(path: str) -> None:
    """
    Delete a staged file. A file that is already gone is not an error.
    """
    try:
        await anyio.Path(path).unlink(missing_ok=True)
    except OSError as exc:
        logger.error("Failed to remove staged file %s: %s", path, exc)


async def remove_staged(staged) -> None:
    if staged is None:
        return
    await remove_staged_path(staged.path)
