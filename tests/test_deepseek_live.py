"""Round trip against the real DeepSeek API; runs only with DEEPSEEK_API_KEY set."""

import os

import pytest

from deepseek_adapter.llm.client import DeepSeekClient
from deepseek_adapter.llm.completion import CompletionRequest, MessageChoice
from deepseek_adapter.llm.providers.deepseek import DEEPSEEK_CHAT

pytestmark = pytest.mark.skipif(
    not os.getenv("DEEPSEEK_API_KEY"), reason="DEEPSEEK_API_KEY not set"
)


@pytest.mark.asyncio
async def test_deepseek_completion():
    request = CompletionRequest.from_prompt(
        "Hello, who are you?", max_tokens=50, temperature=0.5
    )

    async with DeepSeekClient.from_env() as client:
        response = await client.completion_model(DEEPSEEK_CHAT).completion(request)

    assert isinstance(response.choice, MessageChoice), "Unexpected response choice"
    assert response.choice.text, "Response content is empty"
