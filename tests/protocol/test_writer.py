import pytest

from lxml import etree

import ewskit
from ewskit.protocol.enums import XmlNamespace
from ewskit.protocol.writer import XmlWriter, format_value


def test_format_value():

    assert format_value(True) == 'true'
    assert format_value(False) == 'false'
    assert format_value(12) == '12'
    assert format_value('inbox') == 'inbox'
    assert format_value(ewskit.DeleteMode.HARD_DELETE) == 'HardDelete'
    assert format_value(ewskit.ServerVersion.EXCHANGE2010_SP1) == 'Exchange2010_SP1'
    assert format_value(ewskit.DistinguishedFolder.DELETED_ITEMS) == 'deleteditems'


def test_nesting():

    writer = XmlWriter()
    writer.write_start_element(XmlNamespace.MESSAGES, 'Outer')
    writer.write_attribute('Flag', True)
    writer.write_attribute('Skipped', None)
    writer.write_element_value(XmlNamespace.TYPES, 'Inner', 'one')
    writer.write_element_value(XmlNamespace.TYPES, 'Inner', 'two')
    writer.write_end_element()

    assert writer.depth == 0

    root = etree.fromstring(writer.to_bytes())
    assert root.tag == XmlNamespace.MESSAGES.tag('Outer')
    assert root.get('Flag') == 'true'
    assert root.get('Skipped') is None
    assert [child.text for child in root] == ['one', 'two']
    assert root.nsmap['m'] == XmlNamespace.MESSAGES.uri
    assert root.nsmap['t'] == XmlNamespace.TYPES.uri


def test_attributes_before_elements():

    writer = XmlWriter()
    writer.write_start_element(XmlNamespace.MESSAGES, 'Outer')
    writer.write_element_value(XmlNamespace.TYPES, 'Inner', 'one')

    with pytest.raises(ewskit.SerializationError):
        writer.write_attribute('Late', 'value')


def test_incomplete_document():

    writer = XmlWriter()

    with pytest.raises(ewskit.SerializationError):
        writer.to_bytes()

    writer.write_start_element(XmlNamespace.MESSAGES, 'Outer')

    with pytest.raises(ewskit.SerializationError):
        writer.to_bytes()

    writer.write_end_element()

    with pytest.raises(ewskit.SerializationError):
        writer.write_end_element()

    with pytest.raises(ewskit.SerializationError):
        writer.write_start_element(XmlNamespace.MESSAGES, 'Second')


def test_invalid_characters():

    writer = XmlWriter()
    writer.write_start_element(XmlNamespace.MESSAGES, 'Outer')

    with pytest.raises(ewskit.SerializationError):
        writer.write_attribute('Name', 'bad\x00value')

    with pytest.raises(ewskit.SerializationError):
        writer.write_value('bad\x01value')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
