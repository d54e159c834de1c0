"""Finding peers on the local network through UDP broadcast announcements."""

from __future__ import annotations

import socket
import time
from dataclasses import dataclass

from peershare import logger
from peershare.config import DISCOVERY_PORT

ANNOUNCEMENT = b"PEERSHARE_DISCOVERY"
BROADCAST_ADDRESS = "255.255.255.255"
_BUFFER_SIZE = 256


@dataclass(frozen=True)
class PeerInfo:
    """Address of a peer that announced itself."""

    ip: str
    port: int


def _is_announcement(payload: bytes) -> bool:
    return payload.split(b"\0", 1)[0] == ANNOUNCEMENT


class DiscoveryClient:
    """Listens for peer announcements on a UDP port."""

    def __init__(
        self,
        port: int = DISCOVERY_PORT,
        *,
        attempts: int = 5,
        timeout: float | None = None,
        host: str = "",
    ):
        self.port = port
        self.attempts = attempts
        self.timeout = timeout
        self.host = host

    def discover(self) -> list[PeerInfo]:
        """Read up to ``attempts`` datagrams and return the peers that announced.

        Returns an empty list when the port cannot be bound. When a timeout is
        set, listening stops at the first datagram that does not arrive in time.
        """
        logger.info("Listening for peers...")
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            try:
                sock.bind((self.host, self.port))
            except OSError:
                logger.error("Bind failed")
                return []
            sock.settimeout(self.timeout)
            peers: list[PeerInfo] = []
            for _ in range(self.attempts):
                try:
                    payload, (ip, _sender_port) = sock.recvfrom(_BUFFER_SIZE)
                except TimeoutError:
                    break
                if payload and _is_announcement(payload):
                    peer = PeerInfo(ip, self.port)
                    peers.append(peer)
                    logger.success("Found peer at " + peer.ip)
            return peers


class DiscoveryServer:
    """Announces this peer by broadcasting on a UDP port at a fixed interval."""

    def __init__(
        self,
        port: int = DISCOVERY_PORT,
        *,
        address: str = BROADCAST_ADDRESS,
        interval: float = 2.0,
        max_broadcasts: int | None = None,
    ):
        self.port = port
        self.address = address
        self.interval = interval
        self.max_broadcasts = max_broadcasts

    def start(self) -> None:
        """Broadcast announcements; runs forever unless ``max_broadcasts`` is set."""
        logger.info("Starting the Discover Server")
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            logger.success("Broadcasting available")
            sent = 0
            while self.max_broadcasts is None or sent < self.max_broadcasts:
                try:
                    sock.sendto(ANNOUNCEMENT, (self.address, self.port))
                except OSError:
                    pass
                sent += 1
                if self.max_broadcasts is None or sent < self.max_broadcasts:
                    time.sleep(self.interval)