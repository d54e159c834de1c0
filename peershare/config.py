"""Network and transfer settings shared across the package."""

DISCOVERY_PORT = 7777
FILE_TRANSFER_PORT = 9000
CHUNK_SIZE = 64 * 1024