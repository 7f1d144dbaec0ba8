from . import enums
from . import fields
from . import writer
from . import reader
from . import ids
from . import envelope
from . import response
from . import operation
from . import operations
from . import call

from .enums import DeleteMode, DistinguishedFolder, ErrorHandling, ServerVersion, ServiceResult
from .ids import DistinguishedFolderId, FolderId, FolderIdCollection
from .response import ServiceResponse, ServiceResponseCollection
from .operation import Operation
from .operations import DeleteFolder, DeleteUserConfiguration, EmptyFolder
from .call import CallState, ServiceCall


"""
ewskit Protocol Layer
=====================

This package turns typed operation requests into XML request envelopes,
and correlates XML replies back into typed, per-item outcomes.

The protocol layer MUST NOT depend on any transport implementation
(e.g. ZeroMQ); it only requires something that implements
:class:`ewskit.transport.base.Transport`.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Service Facade (ewskit.service)
    High-level semantic API
    - delete_user_configuration()
    - empty_folder()
    - delete_folder()
    - execute() / submit()

    │
    ▼
Service Call (call.py)
    The shared request/response state machine
    - version gate and validation
    - build and send the envelope
    - read exactly N response messages
    - apply the error handling mode

    │
    ▼
Operation Descriptors (operation.py, operations.py)
    One class per request type
    - element names, minimum version
    - expected response count
    - validation, attribute and element hooks

    │
    ▼
Envelope / Outcome Model (envelope.py, response.py, ids.py)
    SOAP envelope, ServiceResponse, folder identifiers

    │
    ▼
XML Primitives (writer.py, reader.py, fields.py, enums.py)
    Canonical names, lxml-backed writer and positional reader

---------------------------------------------------------------------

Design Principles
-----------------

1. Transport Agnostic
   The protocol operates identically regardless of how bytes move.

2. Shared Skeleton
   Operations describe themselves; they never format envelopes or
   correlate responses on their own.

3. Layer Isolation
   Dependencies only flow downward:
       Service -> Call -> Operation -> XML primitives
   Never upward.

4. Positional Correlation
   Response i always belongs to request unit i.

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
