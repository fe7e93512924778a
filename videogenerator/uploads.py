"""Request-scoped storage for uploaded photos.

The upload is written to a uniquely named file under ``Settings.upload_dir``
and removed when the ``stored_upload`` block exits, whatever the outcome.
Disk I/O runs in the threadpool.
"""

import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from videogenerator.models.video import UploadedPhoto

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def _remove(path: Path) -> None:
    try:
        os.remove(path)
    except OSError:
        logger.error("Gagal menghapus file yang diunggah: %s", path, exc_info=True)


def _write(upload_dir: Path, data: bytes) -> Path:
    upload_dir.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(prefix="upload-", dir=upload_dir)
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as out:
            out.write(data)
    except Exception:
        _remove(path)
        raise
    return path


@asynccontextmanager
async def stored_upload(photo: UploadFile, upload_dir: Path) -> AsyncIterator[UploadedPhoto]:
    """Write ``photo`` to disk, yield its handle, then always unlink it."""
    data = await photo.read()
    path = await run_in_threadpool(_write, upload_dir, data)
    try:
        yield UploadedPhoto(
            path=path,
            media_type=photo.content_type or DEFAULT_MEDIA_TYPE,
            filename=photo.filename or path.name,
        )
    finally:
        await run_in_threadpool(_remove, path)
