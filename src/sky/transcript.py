import time
from pathlib import Path
from typing import TextIO

from loguru import logger

from sky.llm_client import Chat


def transcript_path(now: float | None = None, directory: str | Path = ".") -> Path:
    millis = int((time.time() if now is None else now) * 1000)
    return Path(directory) / f"chat-with-sky-{millis}"


class TranscriptChat:
    """Chat wrapper that echoes every exchange to a plain-text file.

    Write failures are logged and otherwise ignored; they never affect the
    turn itself.
    """

    def __init__(self, inner: Chat, file: TextIO):
        self._inner = inner
        self._file = file

    async def say(self, text: str) -> str:
        self._write(f"\nYou: {text}\n")
        try:
            reply = await self._inner.say(text)
            self._write(f"\nSky: {reply}\n")
        finally:
            self._flush()
        return reply

    async def close(self):
        try:
            self._file.close()
        except OSError as e:
            logger.error(f"Failed to close transcript: {e}")
        await self._inner.close()

    def _write(self, content: str):
        try:
            self._file.write(content)
        except OSError as e:
            logger.error(f"Failed to write transcript: {e}")

    def _flush(self):
        try:
            self._file.flush()
        except OSError as e:
            logger.error(f"Failed to flush transcript: {e}")
