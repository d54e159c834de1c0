"""Sending and receiving a single file over TCP with SHA-256 verification."""

from __future__ import annotations

import os
import socket
import threading
from dataclasses import dataclass
from pathlib import Path

from peershare import logger
from peershare.config import CHUNK_SIZE, FILE_TRANSFER_PORT
from peershare.hashing import sha256_file
from peershare.progress import Progress

_HEADER_LIMIT = 2048


@dataclass(frozen=True)
class TransferHeader:
    """Metadata announced by the sender ahead of the file contents."""

    digest: str = ""
    filename: str = ""
    size: int = 0
    chunk_size: int = 0

    @property
    def base_name(self) -> str:
        """The filename without any directory part."""
        cut = max(self.filename.rfind("/"), self.filename.rfind("\\"))
        return self.filename[cut + 1 :]


def build_header(filepath: str | os.PathLike[str], digest: str, size: int, chunk_size: int) -> str:
    """Text of the header that precedes a file on the wire."""
    return (
        f"HASH:{digest}\n"
        f"FILE:{os.fspath(filepath)}\n"
        f"SIZE:{size}\n"
        f"CHUNK:{chunk_size}\n"
        "END\n"
    )


def _parse_count(value: str) -> int:
    count = int(value)
    if count < 0:
        raise ValueError(f"negative count in header: {value!r}")
    return count


def parse_header(text: str) -> TransferHeader:
    """Read a header; lines after ``END`` are ignored, missing fields stay empty.

    Raises ValueError when a size field is not a non-negative integer.
    """
    digest = ""
    filename = ""
    size = 0
    chunk_size = 0
    for line in text.split("\n"):
        if line.startswith("HASH:"):
            digest = line[5:]
        elif line.startswith("FILE:"):
            filename = line[5:]
        elif line.startswith("SIZE:"):
            size = _parse_count(line[5:])
        elif line.startswith("CHUNK:"):
            chunk_size = _parse_count(line[6:])
        elif line == "END":
            break
    return TransferHeader(digest, filename.rstrip(" \r\n\t"), size, chunk_size)


def _header_end(buf: bytes) -> int | None:
    if buf.startswith(b"END\n"):
        return 4
    found = buf.find(b"\nEND\n")
    return None if found < 0 else found + 5


def _read_header(conn: socket.socket) -> tuple[bytes, bytes]:
    """Return the header bytes and whatever file data arrived along with them."""
    buf = b""
    while True:
        end = _header_end(buf)
        if end is not None:
            return buf[:end], buf[end:]
        if len(buf) >= _HEADER_LIMIT:
            return buf, b""
        chunk = conn.recv(_HEADER_LIMIT - len(buf))
        if not chunk:
            return buf, b""
        buf += chunk


def _chunk_count(size: int, chunk_size: int) -> int:
    return -(-size // chunk_size)


class FileSender:
    """Sends files to a receiver at a given address."""

    def __init__(
        self,
        ip: str,
        port: int = FILE_TRANSFER_PORT,
        *,
        chunk_size: int = CHUNK_SIZE,
        timeout: float | None = None,
    ):
        self.ip = ip
        self.port = port
        self.chunk_size = chunk_size
        self.timeout = timeout

    def send_file(self, filepath: str | os.PathLike[str]) -> bool:
        """Send one file; False when the connection fails or the file cannot be opened."""
        logger.info("Connecting to receiver...")
        try:
            sock = socket.create_connection((self.ip, self.port), timeout=self.timeout)
        except OSError:
            logger.error("Connection failed!")
            return False
        with sock:
            logger.success("Connected!")
            try:
                handle = open(filepath, "rb")
            except OSError:
                logger.error("File not found.")
                return False
            with handle:
                size = os.fstat(handle.fileno()).st_size
                digest = sha256_file(filepath)
                logger.info("File SHA256: " + digest)
                header = build_header(filepath, digest, size, self.chunk_size)
                bar = Progress(_chunk_count(size, self.chunk_size))
                try:
                    sock.sendall(header.encode("utf-8"))
                    logger.info("Sending file")
                    blocks = iter(lambda: handle.read(self.chunk_size), b"")
                    for index, block in enumerate(blocks):
                        sock.sendall(block)
                        bar.update(index)
                except OSError:
                    logger.error("Network send error. Aborting transfer.")
                bar.finish()
                logger.success("File sent successfully")
        return True


class FileReceiver:
    """Accepts one sender, stores its file and checks its SHA-256."""

    def __init__(
        self,
        port: int = FILE_TRANSFER_PORT,
        *,
        output_dir: str | os.PathLike[str] = "received",
        host: str = "",
    ):
        self.port = port
        self.output_dir = Path(output_dir)
        self.host = host
        self.listening = threading.Event()

    def start(self) -> Path | None:
        """Receive one file; return its path, or None when its hash did not match.

        Raises ValueError when the header announces an unusable chunk size.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            server.bind((self.host, self.port))
            server.listen(1)
            self.port = server.getsockname()[1]
            self.listening.set()
            logger.info("Waiting for sender")
            client, _address = server.accept()
        with client:
            logger.success("Sender connected")
            raw, leftover = _read_header(client)
            header = parse_header(raw.decode("utf-8", errors="replace"))
            return self._receive(client, header, leftover)

    def _receive(self, client: socket.socket, header: TransferHeader, leftover: bytes) -> Path | None:
        logger.info("Expected SHA256: " + header.digest)
        logger.info("Receiving file: " + header.base_name)
        if header.chunk_size <= 0:
            raise ValueError(f"invalid chunk size in header: {header.chunk_size}")
        out_path = self.output_dir / f"received_{header.base_name}"
        bar = Progress(_chunk_count(header.size, header.chunk_size))
        received = 0
        index = 0
        pending = leftover
        with open(out_path, "wb") as out:
            while received < header.size:
                block = pending or client.recv(header.chunk_size)
                pending = b""
                if not block:
                    break
                out.write(block)
                received += len(block)
                bar.update(index)
                index += 1
        bar.finish()

        logger.info("File received. Verifying SHA256...")
        actual = sha256_file(out_path)
        logger.info("Actual SHA256: " + actual)
        if actual == header.digest:
            logger.success("HASH MATCH ✓ File integrity verified. Saved to 'received' folder.")
            return out_path
        logger.error("HASH MISMATCH ✗ File corrupted. Deleting...")
        out_path.unlink()
        return None