"""Command-line entry point: discover peers, listen for a file, or send one."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from peershare import logger
from peershare.config import DISCOVERY_PORT, FILE_TRANSFER_PORT
from peershare.discovery import DiscoveryClient
from peershare.transfer import FileReceiver, FileSender


def _usage() -> None:
    logger.info("PeerShare-Lite Commands:")
    logger.info("  peershare discover")
    logger.info("  peershare listen")
    logger.info("  peershare send <file> <ip> ")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _usage()
        return 0

    command = args[0]
    if command == "discover":
        peers = DiscoveryClient(DISCOVERY_PORT).discover()
        if not peers:
            logger.warning("No peers found.")
        for peer in peers:
            logger.success(f"Peer found: {peer.ip}:{peer.port}")
        return 0

    if command == "listen":
        FileReceiver(FILE_TRANSFER_PORT).start()
        return 0

    if command == "send":
        if len(args) < 3:
            logger.error("Usage: peershare send <file> <ip>")
            return 0
        FileSender(args[2], FILE_TRANSFER_PORT).send_file(args[1])
        return 0

    logger.error("Unknown command: " + command)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())