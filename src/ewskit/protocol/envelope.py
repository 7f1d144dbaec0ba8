""" The SOAP envelope shared by every request and reply. Building a request
    is the same for every operation: the envelope, the version header, and
    the operation element are written here, while everything specific to
    the operation is delegated to the operation itself.
"""

from ..errors import SoapFaultError
from . import fields
from .enums import ServerVersion, XmlNamespace
from .reader import XmlReader
from .writer import XmlWriter


def write_request(writer, operation, version):
    """ Write the complete request envelope for *operation* using *writer*.
        The order is fixed: the operation element is opened, its attributes
        are written, then its body elements. Errors raised by the writer
        propagate unchanged.
    """

    version = ServerVersion.parse(version)

    writer.write_start_element(XmlNamespace.SOAP, fields.ENVELOPE)

    writer.write_start_element(XmlNamespace.SOAP, fields.HEADER)
    writer.write_start_element(XmlNamespace.TYPES, fields.REQUEST_SERVER_VERSION)
    writer.write_attribute(fields.VERSION, version)
    writer.write_end_element()
    writer.write_end_element()

    writer.write_start_element(XmlNamespace.SOAP, fields.BODY)

    writer.write_start_element(XmlNamespace.MESSAGES, operation.element_name)
    operation.write_attributes(writer)
    operation.write_elements(writer)
    writer.write_end_element()

    writer.write_end_element()
    writer.write_end_element()



def build_request(operation, version):
    """ Return the serialized request envelope for *operation* as bytes.
    """

    writer = XmlWriter()
    write_request(writer, operation, version)
    return writer.to_bytes()



def open_reply(reply):
    """ Parse the *reply* and position a reader at the start of the reply
        body. Returns a (reader, server_info) tuple; *server_info* is a
        dictionary of the ServerVersionInfo header attributes, empty if the
        header was not present.

        A reply that is not wrapped in a SOAP envelope is accepted as-is,
        with the reader positioned before its root element. A reply whose
        body is a SOAP fault raises :class:`ewskit.errors.SoapFaultError`.
    """

    reader = XmlReader.from_reply(reply)
    server_info = dict()

    if not reader.is_start_element(XmlNamespace.SOAP, fields.ENVELOPE):
        return reader, server_info

    reader.read_start_element(XmlNamespace.SOAP, fields.ENVELOPE)

    if reader.is_start_element(XmlNamespace.SOAP, fields.HEADER):
        header = reader.read_element()

        for child in header:
            if child.tag == XmlNamespace.TYPES.tag(fields.SERVER_VERSION_INFO):
                server_info.update(child.attrib)

    reader.read_start_element(XmlNamespace.SOAP, fields.BODY)

    if reader.is_start_element(XmlNamespace.SOAP, fields.FAULT):
        raise _fault(reader.read_element())

    return reader, server_info



def _fault(element):
    """ Translate a SOAP fault element into an exception. The detail, if
        any, may carry a ResponseCode from the errors namespace.
    """

    fault_code = element.findtext(fields.FAULT_CODE, default='')
    fault_string = element.findtext(fields.FAULT_STRING, default='')
    error_code = None

    detail = element.find(fields.FAULT_DETAIL)

    if detail is not None:
        error_code = detail.findtext(XmlNamespace.ERRORS.tag(fields.RESPONSE_CODE))

    return SoapFaultError(fault_code.strip(), fault_string.strip(), error_code)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
