""" A small XML writer with a streaming-style interface, built on top of
    :mod:`lxml.etree`. Elements are opened and closed explicitly, and
    attributes must be written before any content of the element they
    belong to.
"""

import enum

from lxml import etree

from ..errors import SerializationError
from .enums import XmlNamespace


def format_value(value):
    """ Return the string representation of *value* as it should appear on
        the wire. Booleans are lower case, enumerated values use their
        wire representation.
    """

    if isinstance(value, bool):
        if value:
            return 'true'
        else:
            return 'false'

    if isinstance(value, enum.Enum):
        try:
            return value.wire_name
        except AttributeError:
            value = value.value

    return str(value)



class XmlWriter:
    """ Accumulate an XML document one element at a time. The first element
        written is the document root; the document is complete when every
        opened element has been closed, at which point :func:`to_bytes`
        returns the serialized result.
    """

    def __init__(self):

        self.root = None
        self._stack = list()


    @property
    def depth(self):
        return len(self._stack)


    def _current(self):

        try:
            return self._stack[-1]
        except IndexError:
            raise SerializationError('no element is open')


    def write_start_element(self, namespace, name):
        """ Open a new element *name* in the given *namespace*, nested in the
            currently open element, if any.
        """

        tag = XmlNamespace(namespace).tag(name)

        if self._stack:
            parent = self._stack[-1]
            if parent.text:
                raise SerializationError('cannot mix text and elements in ' + parent.tag)
            element = etree.SubElement(parent, tag)
        elif self.root is None:
            element = etree.Element(tag, nsmap=XmlNamespace.nsmap())
            self.root = element
        else:
            raise SerializationError('the document root has already been closed')

        self._stack.append(element)
        return element


    def write_attribute(self, name, value):
        """ Set the attribute *name* on the currently open element. Writing
            a value of None is a no-op. Attributes cannot be written once
            the element has text or child elements.
        """

        if value is None:
            return

        element = self._current()

        if len(element) or element.text:
            raise SerializationError('attribute %s written after the content of %s' % (name, element.tag))

        try:
            element.set(name, format_value(value))
        except ValueError as e:
            raise SerializationError('invalid value for attribute %s: %s' % (name, e))


    def write_value(self, value):
        """ Set the text content of the currently open element.
        """

        if value is None:
            return

        element = self._current()

        if len(element):
            raise SerializationError('cannot mix text and elements in ' + element.tag)

        try:
            element.text = format_value(value)
        except ValueError as e:
            raise SerializationError('invalid text for %s: %s' % (element.tag, e))


    def write_element_value(self, namespace, name, value):
        """ Write a complete element containing only the text *value*.
        """

        self.write_start_element(namespace, name)
        self.write_value(value)
        self.write_end_element()


    def write_end_element(self):
        """ Close the currently open element.
        """

        self._current()
        self._stack.pop()


    def to_bytes(self):
        """ Serialize the completed document, including the XML
            declaration.
        """

        if self.root is None:
            raise SerializationError('nothing has been written')

        if self._stack:
            raise SerializationError('%d element(s) still open' % (len(self._stack)))

        return etree.tostring(self.root, xml_declaration=True, encoding='utf-8')


# end of class XmlWriter


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
