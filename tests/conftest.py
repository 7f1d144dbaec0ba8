import pytest

import ewskit
from ewskit.transport import Transport


SOAP = 'http://schemas.xmlsoap.org/soap/envelope/'
TYPES = 'http://schemas.microsoft.com/exchange/services/2006/types'
MESSAGES = 'http://schemas.microsoft.com/exchange/services/2006/messages'


class RecordingTransport(Transport):
    """ An in-memory transport. Every envelope sent is recorded; each send
        returns the next canned reply, or raises it if it is an exception.
    """

    def __init__(self, replies=(), version=ewskit.ServerVersion.EXCHANGE2013_SP1):
        self.sent = list()
        self.replies = list(replies)
        self.version = version

    @property
    def negotiated_version(self):
        return self.version

    def send(self, envelope):
        self.sent.append(envelope)

        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class Replies:
    """ Build reply documents the way the remote service formats them.
    """

    def message(self, name, result='Success', code=None, text=None, extra=''):

        if result == 'Success' and code is None:
            code = 'NoError'

        parts = list()
        parts.append('<m:%s ResponseClass="%s">' % (name, result))

        if text is not None:
            parts.append('<m:MessageText>%s</m:MessageText>' % (text))
        if code is not None:
            parts.append('<m:ResponseCode>%s</m:ResponseCode>' % (code))

        parts.append('<m:DescriptiveLinkKey>0</m:DescriptiveLinkKey>')
        parts.append(extra)
        parts.append('</m:%s>' % (name))

        return ''.join(parts)


    def reply(self, response_name, messages, soap=True, wrapped=True):

        body = ''.join(messages)

        if wrapped:
            body = '<m:ResponseMessages>' + body + '</m:ResponseMessages>'

        body = '<m:%s xmlns:m="%s" xmlns:t="%s">%s</m:%s>' % (response_name, MESSAGES, TYPES, body, response_name)

        if soap:
            header = '<s:Header><h:ServerVersionInfo xmlns:h="%s" MajorVersion="15" MinorVersion="0" MajorBuildNumber="1497" MinorBuildNumber="2"/></s:Header>' % (TYPES)
            body = '<s:Envelope xmlns:s="%s">%s<s:Body>%s</s:Body></s:Envelope>' % (SOAP, header, body)

        return ('<?xml version="1.0" encoding="utf-8"?>\n' + body).encode('utf-8')


    def fault(self, text, code):

        body = '<s:Envelope xmlns:s="%s"><s:Body><s:Fault>' % (SOAP)
        body += '<faultcode xmlns:a="http://schemas.microsoft.com/exchange/services/2006/types">a:%s</faultcode>' % (code)
        body += '<faultstring xml:lang="en-US">%s</faultstring>' % (text)
        body += '<detail><e:ResponseCode xmlns:e="http://schemas.microsoft.com/exchange/services/2006/errors">%s</e:ResponseCode></detail>' % (code)
        body += '</s:Fault></s:Body></s:Envelope>'

        return body.encode('utf-8')


@pytest.fixture
def replies():
    return Replies()


@pytest.fixture
def recording():
    """ Factory for a :class:`RecordingTransport`.
    """

    def factory(*replies, version=ewskit.ServerVersion.EXCHANGE2013_SP1):
        return RecordingTransport(replies, version)

    return factory


@pytest.fixture
def home(tmp_path, monkeypatch):
    """ Point the ewskit configuration directory at a temporary directory.
    """

    monkeypatch.setattr(ewskit.config.directory, 'found', None)
    monkeypatch.setenv('EWSKIT_HOME', str(tmp_path))
    ewskit.config.clear()

    yield tmp_path

    ewskit.config.clear()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
