"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`ewskit.protocol` so the protocol remains transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO, Union

from ..errors import TransportConnectionError, TransportError, TransportTimeout
from ..protocol.enums import ServerVersion


Reply = Union[bytes, BinaryIO]


class Transport(ABC):
    """Minimal contract for a byte-level request/reply exchange."""

    @abstractmethod
    def send(self, envelope: bytes) -> Reply:
        """Send one serialized request envelope and return the reply.

        The reply is either the complete reply as bytes, or a readable
        binary stream. Failures raise :class:`TransportError`.
        """

    @property
    @abstractmethod
    def negotiated_version(self) -> ServerVersion:
        """The protocol version in effect for requests on this transport."""

    def close(self) -> None:
        """Release any resources held by the transport."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False
