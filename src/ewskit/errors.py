""" Exception classes raised by ewskit. Everything raised deliberately by
    this package is a :class:`ServiceError`; the transport-specific
    subclasses are re-exported by :mod:`ewskit.transport.base` alongside
    the transport interface, and at the top level.

    The taxonomy follows where in a call a failure occurs:

    * :class:`ValidationError`: before anything is sent.
    * :class:`SerializationError`: while the request is being written.
    * :class:`TransportError`: while bytes are moving.
    * :class:`ProtocolError`: the reply does not have the expected shape.
    * :class:`ServiceResponseError`: the reply is well formed, but an
      individual response message reports a failure.
"""


class ServiceError(Exception):
    """ Base class for all ewskit errors.
    """


class ValidationError(ServiceError, ValueError):
    """ A request failed local validation and was never sent. The
        *parameter* attribute names the offending request parameter, if
        there is one.
    """

    def __init__(self, message, parameter=None):
        ServiceError.__init__(self, message)
        self.parameter = parameter


class VersionError(ValidationError):
    """ The request, or some part of it, requires a newer protocol version
        than the one negotiated with the remote service.
    """

    def __init__(self, message, required, actual, parameter=None):
        ValidationError.__init__(self, message, parameter)
        self.required = required
        self.actual = actual


class SerializationError(ServiceError):
    """ The request could not be written as XML.
    """


class TransportError(ServiceError):
    """ Base class for all transport-layer errors, including a reply stream
        that fails part way through being read.
    """


class TransportTimeout(TransportError):
    """ A request did not receive a timely response.
    """


class TransportConnectionError(TransportError):
    """ The transport could not establish or maintain a connection.
    """


class ProtocolError(ServiceError):
    """ The reply from the remote service does not match the shape of the
        request that was sent. The remainder of the reply cannot be trusted.
    """


class ReaderError(ProtocolError):
    """ The reply is not well-formed XML.
    """


class TooFewResponses(ProtocolError):
    """ The reply contains fewer response messages than the request
        requires.
    """

    def __init__(self, message, expected=None, received=None):
        ProtocolError.__init__(self, message)
        self.expected = expected
        self.received = received


class TooManyResponses(ProtocolError):
    """ The reply contains more response messages than the request
        requires.
    """


class SoapFaultError(ProtocolError):
    """ The remote service rejected the request as a whole with a SOAP
        fault, rather than answering it with response messages.
    """

    def __init__(self, fault_code, fault_string, error_code=None):
        message = fault_string
        if error_code:
            message = '%s (%s)' % (fault_string, error_code)

        ProtocolError.__init__(self, message)
        self.fault_code = fault_code
        self.fault_string = fault_string
        self.error_code = error_code


class ServiceResponseError(ServiceError):
    """ An individual response message reported an error. The *response*
        attribute is the :class:`ewskit.protocol.response.ServiceResponse`
        in question, and *index* is its position in the reply.
    """

    def __init__(self, response, index=None):

        if index is None:
            index = response.index

        message = '%s: %s' % (response.error_code, response.error_message)
        if index is not None:
            message = 'response %d: %s' % (index, message)

        ServiceError.__init__(self, message)
        self.response = response
        self.index = index


    @property
    def error_code(self):
        return self.response.error_code


    @property
    def error_message(self):
        return self.response.error_message


class BatchResponseError(TooFewResponses, ServiceResponseError):
    """ The remote service answered a multi-item request with a single
        error response, which is how it reports a failure that applies to
        the whole batch.
    """

    def __init__(self, response, expected):
        ServiceResponseError.__init__(self, response, 0)
        self.expected = expected
        self.received = 1


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
