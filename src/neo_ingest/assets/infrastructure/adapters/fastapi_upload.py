"""FastAPI upload adapter.

ONLY UploadFile conversion - spools a fully received FastAPI ``UploadFile``
to local disk and describes it as a FileDescriptor for ingestion.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
import os
import tempfile
from typing import Optional, Union

from fastapi import UploadFile

from ...core.entities.file_descriptor import FileDescriptor
from ...core.value_objects import TransportStatus


logger = logging.getLogger(__name__)


SPOOL_CHUNK_SIZE = 1024 * 1024
UNNAMED_UPLOAD = "upload"


async def descriptor_from_upload(
    upload: UploadFile,
    spool_dir: Optional[Union[str, os.PathLike]] = None,
    chunk_size: int = SPOOL_CHUNK_SIZE
) -> FileDescriptor:
    """Spool an upload to a temporary file and describe it.

    The caller owns the spooled file and removes it once ingestion is done.
    A part without a filename comes back with ``NO_FILE`` status, and a body
    shorter than the size the client announced with ``PARTIAL_UPLOAD``.

    Args:
        upload: Upload parsed by FastAPI
        spool_dir: Directory for the spooled copy (system temp dir when None)
        chunk_size: Bytes read per chunk

    Returns:
        Descriptor flagged as a genuine upload
    """
    filename = upload.filename or ""
    mime_hint = upload.content_type or "application/octet-stream"

    fd, spool_path = tempfile.mkstemp(prefix="neo-ingest-", dir=spool_dir)
    written = 0
    try:
        with os.fdopen(fd, "wb") as spool:
            while True:
                chunk = await upload.read(chunk_size)
                if not chunk:
                    break
                await asyncio.to_thread(spool.write, chunk)
                written += len(chunk)
    except (Exception, asyncio.CancelledError):
        os.unlink(spool_path)
        raise

    if not filename.strip():
        status = TransportStatus.NO_FILE
    elif upload.size is not None and written < upload.size:
        status = TransportStatus.PARTIAL_UPLOAD
    else:
        status = TransportStatus.OK

    if status is not TransportStatus.OK:
        logger.debug(f"Upload '{filename}' spooled with status {status.value}")

    return FileDescriptor(
        declared_name=filename if filename.strip() else UNNAMED_UPLOAD,
        source_path=spool_path,
        declared_size_bytes=written,
        mime_hint=mime_hint,
        transport_status=status,
        is_uploaded_file=True,
    )
