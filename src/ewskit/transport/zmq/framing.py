"""ZMQ multipart framing for request envelopes.

Request (DEALER -> ROUTER)
    (routing prefix...), version, id, envelope

Reply (ROUTER -> DEALER)
    (routing prefix...), version, id, reply
"""

from __future__ import annotations

import itertools
import threading
from typing import Sequence, Tuple

from ..base import TransportError


# Version of the framing itself, identified by a single byte. It has
# nothing to do with the protocol version negotiated with the service.

FRAMING_VERSION = b'a'

_id_min = 0
_id_max = 0xFFFFFFFF
_id_lock = threading.Lock()
_id_ticker = itertools.count(_id_min)


def next_id() -> bytes:
    """Return the next locally unique request id."""

    global _id_ticker

    with _id_lock:
        request_id = next(_id_ticker)

        if request_id >= _id_max:
            _id_ticker = itertools.count(_id_min)

    return b'%08x' % (request_id,)


def to_frames(request_id: bytes, body: bytes) -> Tuple[bytes, ...]:
    """Encode a request or reply body as multipart frames."""

    return (FRAMING_VERSION, request_id, body)


def from_frames(parts: Sequence[bytes]) -> Tuple[Tuple[bytes, ...], bytes, bytes]:
    """Decode multipart frames into (prefix, id, body).

    ROUTER sockets prepend an identity frame; anything before the three
    framed parts is returned as the prefix.
    """

    if len(parts) < 3:
        raise TransportError(f"expected at least 3 frames, received {len(parts)}")

    prefix = tuple(parts[:-3])
    their_version, request_id, body = parts[-3:]

    if their_version != FRAMING_VERSION:
        raise TransportError(f"message is framing version {their_version!r}, recipient expects {FRAMING_VERSION!r}")

    return prefix, request_id, body
