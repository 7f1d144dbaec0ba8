""" The :class:`ServiceCall` is the end-to-end unit of work: validate an
    operation, send it, and correlate the reply back into one outcome per
    request unit. Every operation shares this machinery; the operation
    itself only describes names, the version gate, and its payload.

    A call moves through an explicit sequence of states::

        NOT_STARTED -> VALIDATING -> SENDING -> READING -> COMPLETED

    and lands in FAILED if anything goes wrong along the way. A failed call
    never exposes partial results.
"""

import enum
import logging

from ..errors import (
    BatchResponseError,
    ServiceResponseError,
    TooFewResponses,
    TooManyResponses,
    ValidationError,
    VersionError,
)
from . import fields
from .enums import ErrorHandling, ServerVersion, ServiceResult, XmlNamespace
from .envelope import build_request, open_reply
from .response import ServiceResponse, ServiceResponseCollection


logger = logging.getLogger(__name__)


class CallState(enum.Enum):

    NOT_STARTED = 'NotStarted'
    VALIDATING = 'Validating'
    SENDING = 'Sending'
    READING = 'Reading'
    COMPLETED = 'Completed'
    FAILED = 'Failed'


class ServiceCall:
    """ Execute a single *operation* against a *transport*. The transport
        is borrowed for the duration of :func:`execute`; the call owns the
        operation and the outcomes it produces.

        :ivar state: The current :class:`CallState`.
        :ivar index: The response message currently being read, if any.
        :ivar error: The exception that moved the call to FAILED, if any.
        :ivar responses: The :class:`ServiceResponseCollection` produced by
            a COMPLETED call; None otherwise.
        :ivar server_info: ServerVersionInfo attributes from the reply.
    """

    def __init__(self, operation, transport):

        self.operation = operation
        self.transport = transport

        self.state = CallState.NOT_STARTED
        self.index = None
        self.error = None
        self.responses = None
        self.server_info = dict()


    def __repr__(self):
        return 'ServiceCall(%r, %s)' % (self.operation, self.state.value)


    def _transition(self, state):
        logger.debug("%s: %s -> %s", self.operation.element_name, self.state.value, state.value)
        self.state = state


    def execute(self):
        """ Run the call to completion, returning the ordered
            :class:`ServiceResponseCollection`. Any exception moves the call
            to FAILED and is re-raised unchanged. A call can only be
            executed once.
        """

        if self.state != CallState.NOT_STARTED:
            raise RuntimeError('a ServiceCall can only be executed once (state is %s)' % (self.state.value))

        try:
            self._transition(CallState.VALIDATING)
            version = self.validate()

            self._transition(CallState.SENDING)
            reply = self.send(version)

            self._transition(CallState.READING)
            responses = self.read(reply)
        except Exception as e:
            self.fail(e)
            raise

        self.index = None
        self.responses = responses
        self._transition(CallState.COMPLETED)

        logger.info("%s completed: %d response(s), %s", self.operation.element_name, len(responses), responses.overall_result.value)
        return responses


    def fail(self, error):

        self.error = error
        self.responses = None
        self._transition(CallState.FAILED)

        logger.debug("%s failed: %s: %s", self.operation.element_name, error.__class__.__name__, error)


    def validate(self):
        """ Check the operation against the negotiated protocol version,
            then let the operation check its own parameters. Returns the
            negotiated version. Nothing has been written at this point.
        """

        operation = self.operation

        try:
            version = ServerVersion.parse(self.transport.negotiated_version)
        except ValueError as e:
            raise ValidationError('transport reports ' + str(e), parameter='version') from e

        required = operation.minimum_version

        if version < required:
            message = '%s requires %s or later, session is %s'
            message = message % (operation.element_name, required.wire_name, version.wire_name)
            raise VersionError(message, required, version)

        operation.validate(version)

        expected = operation.expected_response_count()

        if expected < 1:
            raise ValidationError('%s would not produce any responses' % (operation.element_name))

        return version


    def send(self, version):
        """ Build the complete request envelope and hand it to the transport,
            returning whatever reply the transport provides.
        """

        envelope = build_request(self.operation, version)
        logger.debug("%s: sending %d bytes", self.operation.element_name, len(envelope))

        return self.transport.send(envelope)


    def read(self, reply):
        """ Read exactly the expected number of response messages from the
            *reply*, in order. How an error response is handled depends on
            the operation's error handling mode: THROW_ON_ERROR raises on
            the first one, RETURN_ERRORS collects it like any other.
        """

        operation = self.operation
        expected = operation.expected_response_count()
        name = operation.response_message_element_name
        throw = operation.error_handling == ErrorHandling.THROW_ON_ERROR

        reader, self.server_info = open_reply(reply)
        reader.read_start_element(XmlNamespace.MESSAGES, operation.response_element_name)

        # The ResponseMessages wrapper is always present in replies from
        # the remote service, but bare response messages are accepted too.

        wrapped = reader.is_start_element(XmlNamespace.MESSAGES, fields.RESPONSE_MESSAGES)
        if wrapped:
            reader.read_start_element(XmlNamespace.MESSAGES, fields.RESPONSE_MESSAGES)

        collected = list()

        for index in range(expected):
            self.index = index

            if not reader.is_start_element(XmlNamespace.MESSAGES, name):
                self._too_few(collected, expected)

            response = ServiceResponse.from_xml(reader, name, index)

            if throw and response.result == ServiceResult.ERROR:
                raise ServiceResponseError(response, index)

            collected.append(response)

        if reader.is_start_element(XmlNamespace.MESSAGES, name):
            raise TooManyResponses('%s: more than the %d expected response(s)' % (operation.response_element_name, expected))

        if wrapped:
            reader.read_end_element()

        reader.read_end_element()

        return ServiceResponseCollection(collected)


    def _too_few(self, collected, expected):
        """ The remote service reports an error that applies to the whole
            batch with a single error response, regardless of how many were
            expected. Anything else short of the expected count means the
            reply cannot be correlated with the request.
        """

        received = len(collected)

        if received == 1 and collected[0].result == ServiceResult.ERROR:
            raise BatchResponseError(collected[0], expected)

        message = '%s: expected %d response(s), received %d'
        message = message % (self.operation.response_element_name, expected, received)
        raise TooFewResponses(message, expected, received)


# end of class ServiceCall


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
