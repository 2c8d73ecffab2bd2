import asyncio
import logging
import os
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

from starlette.datastructures import UploadFile

logger = logging.getLogger(__name__)

CONVERTED_SUFFIX = ".webm"
UPLOAD_CHUNK_SIZE = 1024 * 1024


class TranscodingError(Exception):
    """ffmpeg exited non-zero, timed out or could not be started."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def converted_path_for(audio_path: str) -> str:
    return f"{audio_path}{CONVERTED_SUFFIX}"


@contextmanager
def scratch_files(*paths: str) -> Iterator[tuple]:
    """
    Yield the given paths and delete every one of them on exit, including
    when the body raised. Files that were never created are skipped.
    """
    try:
        yield paths
    finally:
        for path in paths:
            try:
                os.remove(path)
            except FileNotFoundError:
                pass
            except OSError:
                logger.warning("Could not remove temporary file %s", path, exc_info=True)


def new_upload_path(upload_dir: str) -> str:
    os.makedirs(upload_dir, exist_ok=True)
    return os.path.join(upload_dir, uuid.uuid4().hex)


async def save_upload(upload: UploadFile, path: str) -> None:
    with open(path, "wb") as f:
        while chunk := await upload.read(UPLOAD_CHUNK_SIZE):
            f.write(chunk)


async def kill_process(process: asyncio.subprocess.Process) -> None:
    if process.returncode is None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
    await process.wait()


async def transcode_to_webm(source_path: str, target_path: str, ffmpeg_binary: str = "ffmpeg",
                            timeout: Optional[float] = None) -> None:
    """Convert any audio ffmpeg can read into a webm container at target_path."""
    try:
        process = await asyncio.create_subprocess_exec(
            ffmpeg_binary, "-hide_banner", "-loglevel", "error", "-y",
            "-i", source_path,
            "-vn", "-f", "webm",
            target_path,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise TranscodingError(f"Could not start {ffmpeg_binary}: {e}") from e

    try:
        _, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError as e:
        await kill_process(process)
        raise TranscodingError(f"ffmpeg timed out after {timeout}s") from e
    except BaseException:
        # Cancelled request: ffmpeg must not write the output after cleanup
        await kill_process(process)
        raise

    if process.returncode != 0:
        error_output = stderr.decode("utf-8", errors="replace").strip()
        raise TranscodingError(
            f"ffmpeg exited with code {process.returncode}",
            returncode=process.returncode,
            stderr=error_output[-2000:],
        )

    logger.debug("Transcoded %s -> %s", source_path, target_path)
