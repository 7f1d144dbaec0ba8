""" Python implementation of a client-side request/response layer for an
    Exchange Web Services style object-management service. Typed operation
    requests are serialized into XML envelopes, dispatched through a
    transport, and the replies are correlated back into per-item outcomes.
"""

# Utility components.

from . import errors

# Submodules used by multiple other components.

from . import protocol
from . import transport
from . import config
home = config.directory

# Primary public-facing interfaces.

from .errors import (
    ServiceError,
    ValidationError,
    VersionError,
    SerializationError,
    ProtocolError,
    ReaderError,
    TooFewResponses,
    TooManyResponses,
    SoapFaultError,
    ServiceResponseError,
    BatchResponseError,
)
from .transport import TransportError, TransportTimeout, TransportConnectionError

from .protocol import (
    DeleteFolder,
    DeleteMode,
    DeleteUserConfiguration,
    DistinguishedFolder,
    DistinguishedFolderId,
    EmptyFolder,
    ErrorHandling,
    FolderId,
    FolderIdCollection,
    ServerVersion,
    ServiceCall,
    ServiceResult,
)
from .service import Service

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
