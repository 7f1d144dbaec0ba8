""" The operation descriptor: everything the shared request/response
    machinery in :mod:`ewskit.protocol.call` needs to know about a specific
    operation. Concrete operations are in :mod:`ewskit.protocol.operations`.
"""

from abc import ABC, abstractmethod

from ..errors import ValidationError
from .enums import ErrorHandling, ServerVersion


def require(value, parameter):
    """ Raise a :class:`ewskit.errors.ValidationError` naming *parameter* if
        *value* is None or a blank string.
    """

    if value is None:
        raise ValidationError('%s must be set' % (parameter), parameter=parameter)

    if isinstance(value, str) and value.strip() == '':
        raise ValidationError('%s must not be blank' % (parameter), parameter=parameter)



class Operation(ABC):
    """ An :class:`Operation` describes one request type. The element names
        and the minimum version are fixed for each subclass; only the
        payload (identifiers, flags, names) varies between instances.

        The *error_handling* mode is chosen when the operation is
        constructed, and cannot be changed afterwards.

        :ivar element_name: The request element written in the SOAP body.
        :ivar response_element_name: The element wrapping the reply.
        :ivar response_message_element_name: One element per outcome.
        :ivar minimum_version: The earliest protocol version that supports
            this operation.
    """

    element_name = None
    response_element_name = None
    response_message_element_name = None
    minimum_version = ServerVersion.EXCHANGE2007_SP1

    def __init__(self, error_handling=ErrorHandling.THROW_ON_ERROR):
        self._error_handling = ErrorHandling(error_handling)


    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self._error_handling.value)


    @property
    def error_handling(self):
        return self._error_handling


    @abstractmethod
    def expected_response_count(self):
        """ Return the number of response messages the remote service will
            send for this request.
        """


    def validate(self, version):
        """ Check the operation parameters against the negotiated protocol
            *version*, raising :class:`ewskit.errors.ValidationError` if the
            request should not be sent. The default implementation accepts
            everything.
        """

        pass


    def write_attributes(self, writer):
        """ Write any attributes of the request element. The default is to
            write none.
        """

        pass


    @abstractmethod
    def write_elements(self, writer):
        """ Write the body of the request element.
        """


# end of class Operation


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
