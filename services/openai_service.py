"""
Streaming chat completions from OpenAI.
"""

import logging
from typing import Any, AsyncIterator, Dict, List, Optional

from openai import AsyncOpenAI

logger = logging.getLogger(__name__)


class OpenAIChatProvider:
    """Opens streamed chat completions and yields the text they produce."""

    def __init__(self, api_key: Optional[str]):
        self._api_key = api_key

    async def stream_chat(
        self, messages: List[Dict[str, str]], **options: Any
    ) -> AsyncIterator[str]:
        """
        Submit a chat completion with stream=True.

        The request is sent before this returns, so submission errors are
        raised here rather than while the caller iterates.

        Args:
            messages: Ordered chat messages
            **options: Completion parameters (model, max_tokens, temperature)

        Returns:
            Async iterator over the text fragments of the completion
        """
        client = AsyncOpenAI(api_key=self._api_key)
        try:
            stream = await client.chat.completions.create(
                messages=messages,
                stream=True,
                **options,
            )
        except Exception:
            await client.close()
            raise
        return self._relay(client, stream)

    async def _relay(self, client: AsyncOpenAI, stream) -> AsyncIterator[str]:
        try:
            async for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta
                if delta and getattr(delta, "content", None):
                    yield delta.content
        except Exception:
            logger.exception("Completion stream failed mid-response")
            raise
        finally:
            await client.close()
