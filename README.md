# peershare

A small command-line tool for sharing files between machines on the same
local network. Peers find each other by UDP broadcast. A file is sent over
TCP in chunks. The receiver then checks the SHA-256 digest of what it wrote
against the digest the sender announced.

## Installation

```
pip install .
```

## Usage

With no arguments, `peershare` lists the commands it knows:

```
peershare
```

Every command exits with status 0, including when it fails or is unknown.
Problems are reported as `[ERROR]` lines.

### Finding peers

```
peershare discover
```

This binds UDP port 7777 and reads five datagrams. Each one that is the
announcement `PEERSHARE_DISCOVERY` is reported as a peer, with its address
and port 7777. No timeout is set, so the command waits until five datagrams
have arrived. If the port cannot be bound, or no announcement was among the
datagrams, it prints `No peers found.`

### Receiving a file

```
peershare listen
```

This waits on TCP port 9000 for one sender, takes one file and exits. The
file is written to `received/received_<name>` in the current directory. Here
`<name>` is the sender's file name with any directory part removed. When the
transfer is done, the SHA-256 digest of the written file is compared with the
announced one. If they differ, the file is deleted.

### Sending a file

```
peershare send <file> <ip>
```

This connects to a receiver at `<ip>` on port 9000 and sends the file in
64 KiB chunks. A progress bar shows how far the transfer has got. The command
reports an error if the connection fails or the file cannot be opened.

## What it does not do

The command line has no way to announce this machine to others. `peershare
discover` only listens. The broadcasting side exists only as the
`DiscoveryServer` class, for use from Python (see below). Transfers are not
encrypted, and a receiver accepts only one file per run.

## Protocol

The sender opens with a plain-text header, one field per line:

```
HASH:<sha256 hex digest>
FILE:<file path>
SIZE:<size in bytes>
CHUNK:<chunk size in bytes>
END
```

The file's raw bytes follow the header. Discovery announcements are UDP
datagrams holding `PEERSHARE_DISCOVERY`, broadcast to port 7777.

## Using it from Python

- `peershare.discovery.DiscoveryClient(port=7777, *, attempts=5, timeout=None, host="")`
  - `.discover()` returns a list of `PeerInfo(ip, port)`.
  - The list is empty when the port cannot be bound.
  - When a timeout is set, listening stops at the first datagram that does
    not arrive in time.
- `peershare.discovery.DiscoveryServer(port=7777, *, address="255.255.255.255", interval=2.0, max_broadcasts=None)`
  - `.start()` broadcasts the announcement every `interval` seconds.
  - It runs forever unless `max_broadcasts` is set.
- `peershare.transfer.FileSender(ip, port=9000, *, chunk_size=65536, timeout=None)`
  - `.send_file(path)` returns `False` when the connection fails or the file
    cannot be opened, and `True` otherwise.
- `peershare.transfer.FileReceiver(port=9000, *, output_dir="received", host="")`
  - `.start()` receives one file. It returns the path of the saved file, or
    `None` when the digest did not match.
  - It raises `ValueError` when the header gives a chunk size of zero or less.
  - Its `listening` event is set once the socket is listening. Port 0 picks
    a free port, and `.port` then holds the one chosen.
- `peershare.transfer.build_header(filepath, digest, size, chunk_size)` and
  `parse_header(text)` write and read the header above.
  - `parse_header` returns a `TransferHeader` with `digest`, `filename`,
    `size`, `chunk_size` and `base_name`.
  - It raises `ValueError` when a size field is not a non-negative integer.
- `peershare.hashing.sha256(data)` and `sha256_file(path)` return lowercase
  hex digests. Text is hashed as its UTF-8 bytes.
- `peershare.progress.Progress(total, width=40, *, stream=None)`
  - `.update(current)` redraws the bar in place.
  - `.finish()` draws it full.
- `peershare.logger` has `info`, `success`, `warning` and `error`. Each
  prints a coloured, tagged line.

## Running the tests

```
pip install .[test]
pytest
```