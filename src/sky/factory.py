from pathlib import Path

from loguru import logger

from sky.config import Config
from sky.errors import MissingApiKeyError, SkyError
from sky.llm_client import Chat, CompletionClient
from sky.transcript import TranscriptChat, transcript_path


def chat_factory(
    config: Config, report: bool = False, directory: str | Path = "."
) -> Chat:
    if not config.api_key:
        raise MissingApiKeyError()

    client = CompletionClient(config)
    if not report:
        return client

    path = transcript_path(directory=directory)
    try:
        file = open(path, "w", encoding="utf-8")
    except OSError as e:
        raise SkyError(f"Failed to create transcript file {path}: {e}")
    logger.debug(f"Writing transcript to {path}")
    return TranscriptChat(client, file)
