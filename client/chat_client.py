"""Simple WebSocket client for manual testing."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import time

import websockets

DEFAULT_URL = "ws://127.0.0.1:8000/ws"


async def run_client(
    url: str, document: str, action: str, prompt_id: str | None, timeout: float
) -> None:
    """Ask the service to continue a document and print what was appended."""

    logger = logging.getLogger("chat_client")
    start = time.perf_counter()

    command = {"document": document, "action": action}
    if prompt_id:
        command["prompt_id"] = prompt_id

    async with websockets.connect(url, ping_interval=None) as websocket:
        await websocket.send(json.dumps(command))
        logger.info("Sent %s command for %s", action, document)

        message = await asyncio.wait_for(websocket.recv(), timeout=timeout)
        frame = json.loads(message)

        if "error" in frame:
            logger.error("Received error frame: %s", frame.get("detail") or frame["error"])
            raise SystemExit(1)

        elapsed = time.perf_counter() - start
        logger.info("Reply appended (%d chars) in %.2fs", len(frame["appended"]), elapsed)
        print(frame["appended"].strip())


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Test client for the document chat service.")
    parser.add_argument("--url", default=DEFAULT_URL, help="WebSocket URL (default: %(default)s)")
    parser.add_argument("--document", required=True, help="Document path below DOCUMENTS_DIR.")
    parser.add_argument(
        "--action",
        choices=("chat", "summarize", "prompt"),
        default="chat",
        help="What to do with the document.",
    )
    parser.add_argument("--prompt-id", help="Custom prompt id for the prompt action.")
    parser.add_argument(
        "--timeout", type=float, default=60.0, help="Seconds to wait for the reply."
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    try:
        asyncio.run(run_client(args.url, args.document, args.action, args.prompt_id, args.timeout))
    except KeyboardInterrupt:  # pragma: no cover - manual usage only
        pass


if __name__ == "__main__":  # pragma: no cover
    main()
