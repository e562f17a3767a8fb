from prompt_toolkit import PromptSession
from rich.console import Console
from rich.panel import Panel

from sky.errors import CompletionError
from sky.llm_client import Chat


class Repl:
    def __init__(self, chat: Chat, console: Console, prompt_session: PromptSession):
        self._chat = chat
        self._console = console
        self._prompt_session = prompt_session

    async def start(self):
        while True:
            try:
                user_input = await self._prompt_session.prompt_async("You: ")
            except (EOFError, KeyboardInterrupt):
                return

            try:
                reply = await self._chat.say(user_input)
            except CompletionError as e:
                self._console.print(Panel.fit(str(e), border_style="red"))
                continue

            self._console.print(f"\nSky: {reply}\n", markup=False, highlight=False)
