"""
Command line entry point: run one completion against DeepSeek.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from .config import Configuration
from .llm.client import DeepSeekClient
from .llm.completion import CompletionRequest, MessageChoice
from .llm.errors import CompletionError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="deepseek-adapter",
        description="Send a single prompt to a DeepSeek chat model.",
    )
    parser.add_argument("prompt", help="Prompt text to send")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--model", help="Model name (defaults to the config value)")
    parser.add_argument("--max-tokens", type=int, default=None)
    parser.add_argument("--temperature", type=float, default=None)
    return parser.parse_args(argv)


def configure_logging(logging_cfg: dict) -> None:
    level_name = str(logging_cfg.get("level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=logging_cfg.get(
            "format", "%(asctime)s - %(levelname)s - %(message)s"
        ),
    )


async def run(args: argparse.Namespace) -> int:
    config = Configuration(args.config)
    configure_logging(config.get_logging_config())

    llm_config = config.get_llm_config()
    model_name = args.model or llm_config.get("model", "deepseek-chat")
    max_tokens = (
        args.max_tokens if args.max_tokens is not None
        else llm_config.get("max_tokens")
    )
    temperature = (
        args.temperature if args.temperature is not None
        else llm_config.get("temperature")
    )

    request = CompletionRequest.from_prompt(
        args.prompt, max_tokens=max_tokens, temperature=temperature
    )

    async with DeepSeekClient(config.deepseek_settings()) as client:
        model = client.completion_model(model_name)
        try:
            response = await model.completion(request)
        except CompletionError as e:
            logger.error(f"Completion failed: {e.message}")
            return 1

    if isinstance(response.choice, MessageChoice):
        print(response.choice.text)
    else:
        print(
            json.dumps(
                {"tool": response.choice.name, "arguments": response.choice.arguments},
                indent=2,
            )
        )
    return 0


def main(argv: list[str] | None = None) -> None:
    sys.exit(asyncio.run(run(parse_args(argv))))


if __name__ == "__main__":
    main()
