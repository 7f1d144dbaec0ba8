import io
import pytest

import ewskit
from ewskit.protocol.enums import XmlNamespace
from ewskit.protocol.reader import XmlReader


M = XmlNamespace.MESSAGES
T = XmlNamespace.TYPES

document = b'''<?xml version="1.0" encoding="utf-8"?>
<m:Outer xmlns:m="http://schemas.microsoft.com/exchange/services/2006/messages"
         xmlns:t="http://schemas.microsoft.com/exchange/services/2006/types" Name="outer">
    <!-- comments are not elements -->
    <m:First>one</m:First>
    <t:Second Id="2"/>
    <m:Third><m:Nested>deep</m:Nested></m:Third>
</m:Outer>
'''


def test_positional():

    reader = XmlReader.from_reply(document)

    assert reader.current is None
    assert reader.is_start_element(M, 'Outer')
    assert not reader.is_start_element(T, 'Outer')

    reader.read_start_element(M, 'Outer')
    assert reader.read_attribute('Name') == 'outer'
    assert reader.read_attribute('Missing') is None

    with pytest.raises(ewskit.ProtocolError):
        reader.read_attribute('Missing', required=True)

    assert reader.read_element_value(M, 'First') == 'one'

    reader.read_start_element(T, 'Second')
    assert reader.read_attribute('Id') == '2'
    assert reader.read_value() == ''
    reader.read_end_element()

    element = reader.read_element()
    assert element.tag == M.tag('Third')

    assert reader.at_end()
    reader.read_end_element()


def test_file_like():

    reader = XmlReader.from_reply(io.BytesIO(document))
    reader.read_start_element(M, 'Outer')
    assert reader.is_start_element(M, 'First')


def test_mismatch():

    reader = XmlReader.from_reply(document)
    reader.read_start_element(M, 'Outer')

    with pytest.raises(ewskit.ProtocolError):
        reader.read_start_element(M, 'Second')

    # A failed read does not consume anything.

    assert reader.is_start_element(M, 'First')

    with pytest.raises(ewskit.ProtocolError):
        reader.read_end_element()


def test_end_of_element():

    reader = XmlReader.from_reply(document)
    reader.read_start_element(M, 'Outer')
    reader.skip_element()
    reader.skip_element()
    reader.skip_element()

    assert reader.peek() is None

    with pytest.raises(ewskit.ProtocolError):
        reader.read_start_element(M, 'Fourth')

    with pytest.raises(ewskit.ProtocolError):
        reader.read_element()


def test_malformed():

    with pytest.raises(ewskit.ReaderError):
        XmlReader.from_reply(b'<m:Outer xmlns:m="urn:x"><m:Inner></m:Outer>')

    with pytest.raises(ewskit.ReaderError):
        XmlReader.from_reply(b'')

    # ReaderError is a ProtocolError: the reply cannot be trusted.

    with pytest.raises(ewskit.ProtocolError):
        XmlReader.from_reply(b'not xml at all')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
