"""ZeroMQ request/reply transport.

The client side is a DEALER socket carrying one request envelope at a time;
the server side is a ROUTER socket that hands each envelope to a handler
function and returns whatever it produces. The server exists so that a
service stub can be stood up on a local port, as the test suite does.

Public surface area:
    - Client / Server classes
    - client(address, port) cache helper
"""

from __future__ import annotations

import atexit
import logging
import threading
import time
from typing import Callable, Dict, Optional, Tuple

import zmq

from ...protocol.enums import ServerVersion
from ..base import Transport, TransportConnectionError, TransportError, TransportTimeout
from .framing import from_frames, next_id, to_frames


logger = logging.getLogger(__name__)

minimum_port = 10079
maximum_port = 13679
zmq_context = zmq.Context()


class Client(Transport):
    """Issue requests via a ZeroMQ DEALER socket and wait for the reply.

    One request/reply exchange holds the socket lock from send to receipt,
    so a single client can be shared between threads; exchanges are
    serialized.
    """

    timeout = 30.0

    def __init__(self, address: str, port: int, version=ServerVersion.EXCHANGE2013_SP1, timeout: Optional[float] = None):
        self.port = int(port)
        self.address = address
        self._version = ServerVersion.parse(version)

        if timeout is not None:
            self.timeout = float(timeout)

        server = f"tcp://{address}:{self.port}"
        identity = f"request.Client.{id(self)}".encode()

        self.socket = zmq_context.socket(zmq.DEALER)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.identity = identity
        self.socket.connect(server)

        # The lock around the ZeroMQ socket is necessary in a multithreaded
        # application; ZeroMQ makes no attempt to be thread-safe.

        self.socket_lock = threading.Lock()
        self._closed = False

    def __repr__(self) -> str:
        return f"Client({self.address!r}, {self.port}, {self._version.wire_name})"

    @property
    def negotiated_version(self) -> ServerVersion:
        return self._version

    @property
    def is_open(self) -> bool:
        return not self._closed

    def send(self, envelope: bytes) -> bytes:
        if self._closed:
            raise TransportConnectionError(f"{self!r} is closed")

        request_id = next_id()
        frames = to_frames(request_id, envelope)

        with self.socket_lock:
            try:
                self.socket.send_multipart(frames)
            except zmq.ZMQError as e:
                raise TransportConnectionError(str(e))

            logger.debug("%s:%d: sent request %s", self.address, self.port, request_id.decode())
            return self._receive(request_id)

    def _receive(self, request_id: bytes) -> bytes:
        """Wait for the reply to *request_id*, discarding any late replies
        to earlier requests that timed out."""

        deadline = time.monotonic() + self.timeout

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise TransportTimeout(f"no reply in {self.timeout:.2f} sec")

            try:
                ready = self.socket.poll(int(remaining * 1000) + 1)
                if not ready:
                    continue
                parts = self.socket.recv_multipart()
            except zmq.ZMQError as e:
                raise TransportConnectionError(str(e))

            _prefix, reply_id, body = from_frames(parts)

            if reply_id != request_id:
                logger.warning("%s:%d: discarding stale reply %s", self.address, self.port, reply_id.decode())
                continue

            return body

    def close(self) -> None:
        with self.socket_lock:
            if not self._closed:
                self._closed = True
                self.socket.close()


class Server:
    """Receive requests via a ZeroMQ ROUTER socket, and answer them.

    The *handler* is called with each request envelope and returns the
    reply bytes; returning None sends no reply at all. If no *port* is
    given the first available port in the default range is used.

    :ivar hostname: The hostname on which this server can be contacted.
    :ivar port: The port on which this server is listening for connections.
    """

    def __init__(self, handler: Callable[[bytes], Optional[bytes]], hostname: str = "127.0.0.1", port: Optional[int] = None):
        self.handler = handler
        self.hostname = hostname

        self.socket = zmq_context.socket(zmq.ROUTER)
        self.socket.setsockopt(zmq.LINGER, 0)

        try:
            if port is None:
                self.port = self.socket.bind_to_random_port(f"tcp://{hostname}", minimum_port, maximum_port)
            else:
                self.socket.bind(f"tcp://{hostname}:{int(port)}")
                self.port = int(port)
        except zmq.ZMQError as e:
            self.socket.close()
            raise TransportConnectionError(f"cannot listen on {hostname}: {e}")

        self.shutdown = False
        self.thread = threading.Thread(target=self.run, daemon=True)
        self.thread.start()

    def _req_incoming(self, parts: Tuple[bytes, ...]) -> None:
        try:
            prefix, request_id, envelope = from_frames(parts)
        except TransportError:
            logger.exception("discarding malformed request")
            return

        try:
            reply = self.handler(envelope)
        except Exception:
            logger.exception("request handler failed for request %s", request_id.decode())
            return

        if reply is None:
            return

        self.socket.send_multipart(prefix + to_frames(request_id, reply))

    def run(self) -> None:
        poller = zmq.Poller()
        poller.register(self.socket, zmq.POLLIN)

        while not self.shutdown:
            for active, _flag in poller.poll(100):
                if active == self.socket:
                    self._req_incoming(tuple(self.socket.recv_multipart()))

        self.socket.close()

    def close(self) -> None:
        self.shutdown = True
        self.thread.join()


client_connections: Dict[Tuple[str, int], Client] = {}
_connections_lock = threading.Lock()


def client(address: str, port: int, **kwargs) -> Client:
    """Factory function for a :class:`Client` instance. Use of this method is
    encouraged to streamline re-use of established connections."""

    key = (address, int(port))

    with _connections_lock:
        instance = client_connections.get(key)

        if instance is None or not instance.is_open:
            instance = Client(address, port, **kwargs)
            client_connections[key] = instance

    return instance


def shutdown() -> None:
    with _connections_lock:
        for instance in client_connections.values():
            instance.close()
        client_connections.clear()


atexit.register(shutdown)
