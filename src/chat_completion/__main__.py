"""Interactive chat. Run with: python -m chat_completion"""

import argparse
import asyncio
import logging
import sys

from chat_completion.config import get_settings
from chat_completion.llm import (
    ChatCompletionError,
    ConversationClient,
    create_conversation_client,
    create_http_client,
)

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"exit", "quit"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chat_completion", description="Chat from the terminal")
    parser.add_argument("--model", default=None, help="Model name (default: LLM_MODEL)")
    parser.add_argument("--history-limit", type=int, default=None, help="Chat window size")
    parser.add_argument(
        "--system",
        action="append",
        default=None,
        help="System prompt; repeat for several (default: PROMPTS_FILE)",
    )
    return parser.parse_args(argv)


async def chat_loop(conversation: ConversationClient) -> None:
    """Read lines until EOF or exit, printing each reply."""
    while True:
        try:
            line = await asyncio.to_thread(input, "> ")
        except EOFError:
            break
        text = line.strip()
        if not text:
            continue
        if text.lower() in EXIT_COMMANDS:
            break
        try:
            reply = await conversation.ask(text)
        except ChatCompletionError as e:
            logger.warning("Completion failed: %s", e)
            continue
        print(reply)


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    if not settings.llm_api_key:
        logger.error("LLM_API_KEY is not set")
        return 1
    async with create_http_client() as http_client:
        conversation = create_conversation_client(
            http_client,
            model=args.model,
            history_limit=args.history_limit,
            system_prompts=args.system,
        )
        await chat_loop(conversation)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
