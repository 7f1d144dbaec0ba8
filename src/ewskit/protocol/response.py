""" The outcome of one logical sub-operation, as reported by a single
    response message, and the ordered collection of outcomes for a call.
"""

from lxml import etree

from ..errors import ProtocolError
from . import fields
from .enums import ServiceResult, XmlNamespace


class ServiceResponse:
    """ The :class:`ServiceResponse` is the outcome of a single response
        message. A successful response has no error code or message; a
        warning or an error always has both, though the message may be an
        empty string if the remote service did not provide one.

        Instances are not modified after they are created.

        :ivar result: A :class:`ewskit.protocol.enums.ServiceResult`.
        :ivar error_code: The ResponseCode reported by the remote service.
        :ivar error_message: The MessageText reported by the remote service.
        :ivar error_details: A dictionary of additional name/value pairs
            from the MessageXml element, if any.
        :ivar index: The position of this response in the reply.
    """

    def __init__(self, result=ServiceResult.SUCCESS, error_code=None, error_message=None, error_details=None, index=None):

        result = ServiceResult(result)

        if result == ServiceResult.SUCCESS:
            error_code = None
            error_message = None
        else:
            if error_code is None:
                raise ValueError('a %s response requires an error code' % (result.value))
            if error_message is None:
                error_message = ''

        if error_details is None:
            error_details = dict()

        self._result = result
        self._error_code = error_code
        self._error_message = error_message
        self._error_details = dict(error_details)
        self._index = index


    @property
    def result(self):
        return self._result


    @property
    def error_code(self):
        return self._error_code


    @property
    def error_message(self):
        return self._error_message


    @property
    def error_details(self):
        return dict(self._error_details)


    @property
    def index(self):
        return self._index


    @property
    def succeeded(self):
        return self._result == ServiceResult.SUCCESS


    def __repr__(self):
        if self.succeeded:
            return 'ServiceResponse(Success)'
        return 'ServiceResponse(%s, %r, %r)' % (self._result.value, self._error_code, self._error_message)


    @classmethod
    def from_xml(cls, reader, element_name, index=None):
        """ Read one complete response message named *element_name* from
            *reader*, regardless of whether it reports success or failure;
            on return the reader is positioned after the element.
        """

        reader.read_start_element(XmlNamespace.MESSAGES, element_name)
        response_class = reader.read_attribute(fields.RESPONSE_CLASS, required=True)

        try:
            result = ServiceResult(response_class)
        except ValueError:
            raise ProtocolError('unknown %s: %r' % (fields.RESPONSE_CLASS, response_class))

        error_code = None
        error_message = None
        error_details = dict()

        # The remote service may include elements specific to the operation
        # in the response message; the generic outcome only needs these few,
        # and anything else is skipped.

        while not reader.at_end():
            if reader.is_start_element(XmlNamespace.MESSAGES, fields.RESPONSE_CODE):
                error_code = reader.read_element_value(XmlNamespace.MESSAGES, fields.RESPONSE_CODE)
            elif reader.is_start_element(XmlNamespace.MESSAGES, fields.MESSAGE_TEXT):
                error_message = reader.read_element_value(XmlNamespace.MESSAGES, fields.MESSAGE_TEXT)
            elif reader.is_start_element(XmlNamespace.MESSAGES, fields.MESSAGE_XML):
                error_details.update(_read_message_xml(reader))
            else:
                reader.skip_element()

        reader.read_end_element()

        if result == ServiceResult.SUCCESS:
            return cls(result, index=index)

        if error_code is None:
            raise ProtocolError('%s response %s has no %s' % (result.value, element_name, fields.RESPONSE_CODE))

        return cls(result, error_code, error_message, error_details, index)


# end of class ServiceResponse



def _read_message_xml(reader):
    """ The MessageXml element carries extra detail about an error. Value
        elements contribute their Name attribute and text; any other element
        contributes its local name and text.
    """

    details = dict()
    element = reader.read_element()

    for child in element:
        if not isinstance(child.tag, str):
            continue

        if child.tag == XmlNamespace.TYPES.tag(fields.VALUE):
            name = child.get(fields.NAME)
        else:
            name = etree.QName(child).localname

        if name:
            details[name] = child.text or ''

    return details



class ServiceResponseCollection:
    """ The ordered outcomes of a single call; the response at position *i*
        corresponds to the *i*-th unit of the request.
    """

    def __init__(self, responses=()):
        self._responses = tuple(responses)


    def __getitem__(self, index):
        return self._responses[index]


    def __iter__(self):
        return iter(self._responses)


    def __len__(self):
        return len(self._responses)


    def __repr__(self):
        return 'ServiceResponseCollection(%r)' % (list(self._responses),)


    @property
    def overall_result(self):
        """ ERROR if any response is an error, otherwise WARNING if any
            response is a warning, otherwise SUCCESS.
        """

        results = set(response.result for response in self._responses)

        if ServiceResult.ERROR in results:
            return ServiceResult.ERROR
        if ServiceResult.WARNING in results:
            return ServiceResult.WARNING

        return ServiceResult.SUCCESS


    def errors(self):
        """ Return the responses that did not succeed, in order.
        """

        return [response for response in self._responses if not response.succeeded]


# end of class ServiceResponseCollection


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
