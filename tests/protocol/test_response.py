import pytest

import ewskit
from ewskit.protocol.enums import XmlNamespace
from ewskit.protocol.reader import XmlReader
from ewskit.protocol.response import ServiceResponse, ServiceResponseCollection


R = ewskit.ServiceResult
NAME = 'EmptyFolderResponseMessage'


def read(replies, *messages):

    document = replies.reply('EmptyFolderResponse', messages, soap=False, wrapped=False)
    reader = XmlReader.from_reply(document)
    reader.read_start_element(XmlNamespace.MESSAGES, 'EmptyFolderResponse')

    responses = list()
    index = 0
    while not reader.at_end():
        responses.append(ServiceResponse.from_xml(reader, NAME, index))
        index += 1

    reader.read_end_element()
    return responses


def test_success(replies):

    response, = read(replies, replies.message(NAME))

    assert response.result == R.SUCCESS
    assert response.succeeded
    assert response.error_code is None
    assert response.error_message is None
    assert response.error_details == {}
    assert response.index == 0


def test_error_and_warning(replies):

    error = replies.message(NAME, 'Error', 'ErrorItemNotFound', 'The specified object was not found in the store.')
    warning = replies.message(NAME, 'Warning', 'ErrorBatchProcessingStopped', '')

    first, second = read(replies, error, warning)

    assert first.result == R.ERROR
    assert not first.succeeded
    assert first.error_code == 'ErrorItemNotFound'
    assert first.error_message == 'The specified object was not found in the store.'
    assert first.index == 0

    assert second.result == R.WARNING
    assert second.error_code == 'ErrorBatchProcessingStopped'
    assert second.error_message == ''
    assert second.index == 1


def test_message_xml(replies):

    extra = '<m:MessageXml><t:Value Name="InnerErrorMessageText">detail text</t:Value><t:LineNumber>3</t:LineNumber></m:MessageXml>'
    extra += '<m:SomethingElse><m:Ignored/></m:SomethingElse>'
    message = replies.message(NAME, 'Error', 'ErrorSchemaValidation', 'bad request', extra=extra)

    response, = read(replies, message)

    assert response.error_details == {'InnerErrorMessageText': 'detail text', 'LineNumber': '3'}


def test_malformed_messages(replies):

    missing_code = '<m:%s ResponseClass="Error"><m:MessageText>no code</m:MessageText></m:%s>' % (NAME, NAME)

    with pytest.raises(ewskit.ProtocolError):
        read(replies, missing_code)

    bad_class = '<m:%s ResponseClass="Maybe"/>' % (NAME)

    with pytest.raises(ewskit.ProtocolError):
        read(replies, bad_class)

    no_class = '<m:%s/>' % (NAME)

    with pytest.raises(ewskit.ProtocolError):
        read(replies, no_class)


def test_construction():

    with pytest.raises(ValueError):
        ServiceResponse(R.ERROR)

    response = ServiceResponse(R.SUCCESS, 'NoError', 'ignored')
    assert response.error_code is None
    assert response.error_message is None

    response = ServiceResponse('Error', 'ErrorAccessDenied')
    assert response.result == R.ERROR
    assert response.error_message == ''

    with pytest.raises(AttributeError):
        response.result = R.SUCCESS

    details = response.error_details
    details['added'] = 'locally'
    assert response.error_details == {}


def test_collection():

    success = ServiceResponse()
    warning = ServiceResponse(R.WARNING, 'ErrorBatchProcessingStopped')
    error = ServiceResponse(R.ERROR, 'ErrorItemNotFound')

    assert ServiceResponseCollection().overall_result == R.SUCCESS
    assert ServiceResponseCollection([success, success]).overall_result == R.SUCCESS
    assert ServiceResponseCollection([success, warning]).overall_result == R.WARNING
    assert ServiceResponseCollection([error, warning]).overall_result == R.ERROR

    collection = ServiceResponseCollection([success, error, warning])
    assert len(collection) == 3
    assert collection[1] is error
    assert list(collection) == [success, error, warning]
    assert collection.errors() == [error, warning]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
