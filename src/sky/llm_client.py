from typing import Protocol

from loguru import logger
from openai import APIError, AsyncOpenAI
from pydantic import BaseModel, ValidationError

from sky.config import Config
from sky.errors import CompletionError, MissingApiKeyError
from sky.history import History
from sky.prompt import build_prompt

TEMPERATURE = 0.9
MAX_TOKENS = 150
TOP_P = 1
FREQUENCY_PENALTY = 0.0
PRESENCE_PENALTY = 0.6
STOP = ["You:", "Sky:"]


class Choice(BaseModel):
    text: str


class CompletionResponse(BaseModel):
    choices: list[Choice]


class Chat(Protocol):
    async def say(self, text: str) -> str: ...

    async def close(self) -> None: ...


class CompletionClient:
    def __init__(
        self,
        config: Config,
        openai_client: AsyncOpenAI | None = None,
        history: History | None = None,
    ):
        if not config.api_key:
            raise MissingApiKeyError()
        self._model = config.model
        self._history = history if history is not None else History()
        self._openai = openai_client or AsyncOpenAI(
            api_key=config.api_key, base_url=config.base_url, max_retries=0
        )

    @property
    def history(self) -> History:
        return self._history

    async def say(self, text: str) -> str:
        prompt = build_prompt(self._history.with_pending(text))
        logger.debug(f"Requesting completion ({len(prompt)} prompt chars)")
        try:
            raw = await self._openai.completions.create(
                model=self._model,
                prompt=prompt,
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
                top_p=TOP_P,
                frequency_penalty=FREQUENCY_PENALTY,
                presence_penalty=PRESENCE_PENALTY,
                stop=STOP,
            )
        except APIError as e:
            raise CompletionError(f"Completion request failed: {e}")
        except ValueError as e:
            raise CompletionError(f"Malformed completion response: {e}")

        # The SDK does not check the body shape, so validate it here.
        try:
            response = CompletionResponse.model_validate(raw, from_attributes=True)
        except ValidationError as e:
            raise CompletionError(f"Malformed completion response: {e}")

        if not response.choices:
            raise CompletionError("Completion response contained no choices")
        reply = response.choices[0].text.strip()

        self._history.add_exchange(text, reply)
        return reply

    async def close(self):
        await self._openai.close()

    def __str__(self) -> str:
        return str(self._history)
