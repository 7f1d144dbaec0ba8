""" A positional XML reader built on top of :mod:`lxml.etree`. The reply is
    parsed in full, and then walked one element at a time: the caller asks
    for the element it expects next, and any mismatch is a
    :class:`ewskit.errors.ProtocolError`.
"""

from lxml import etree

from ..errors import ProtocolError, ReaderError, ServiceError, TransportError
from .enums import XmlNamespace


def _parser():
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True, remove_pis=True)



def parse(reply):
    """ Parse *reply*, which is either bytes or a file-like object with a
        read() method, and return the root element. A failure while reading
        from the file-like object raises :class:`ewskit.errors.TransportError`
        unless it is already an ewskit error; malformed XML raises
        :class:`ewskit.errors.ReaderError`.
    """

    try:
        reply.read
    except AttributeError:
        data = reply
    else:
        try:
            data = reply.read()
        except ServiceError:
            raise
        except Exception as e:
            raise TransportError('reply interrupted: ' + str(e)) from e

    if data is None or len(data) == 0:
        raise ReaderError('empty reply')

    if isinstance(data, str):
        data = data.encode('utf-8')

    try:
        return etree.fromstring(data, _parser())
    except etree.XMLSyntaxError as e:
        raise ReaderError('malformed reply: ' + str(e))



def describe(tag):
    """ Return a human-friendly representation of a Clark notation *tag*,
        substituting the known namespace prefixes.
    """

    qname = etree.QName(tag)

    for namespace in XmlNamespace:
        if namespace.uri == qname.namespace:
            return namespace.prefix + ':' + qname.localname

    return qname.localname



class _Frame:
    """ One open element, and the position of the next unread child.
    """

    def __init__(self, element, children):
        self.element = element
        self.children = children
        self.position = 0


    def peek(self):
        try:
            return self.children[self.position]
        except IndexError:
            return None


    def advance(self):
        child = self.children[self.position]
        self.position += 1
        return child


# end of class _Frame



class XmlReader:
    """ Walk an element tree in document order. The reader starts out
        positioned before *root*, which is the first and only element
        available at the top level; :func:`read_start_element` descends
        into an element, :func:`read_end_element` leaves it.
    """

    def __init__(self, root):

        self._stack = [_Frame(None, [root])]


    @classmethod
    def from_reply(cls, reply):
        return cls(parse(reply))


    @property
    def current(self):
        """ The most recently opened element, or None at the top level.
        """

        return self._stack[-1].element


    def peek(self):
        """ Return the next unread element at the current level without
            consuming it, or None if there are no more.
        """

        return self._stack[-1].peek()


    def at_end(self):
        return self.peek() is None


    def is_start_element(self, namespace, name):
        """ Return True if the next unread element is *name* in the given
            *namespace*.
        """

        element = self.peek()

        if element is None:
            return False

        return element.tag == XmlNamespace(namespace).tag(name)


    def read_element(self):
        """ Consume and return the next element at the current level,
            without descending into it.
        """

        frame = self._stack[-1]

        if frame.peek() is None:
            raise ProtocolError('unexpected end of %s' % (self._where()))

        return frame.advance()


    skip_element = read_element


    def read_start_element(self, namespace, name):
        """ Consume the next element, which must be *name* in the given
            *namespace*, and descend into it. The element is returned so that
            the caller can inspect its attributes.
        """

        expected = XmlNamespace(namespace).tag(name)
        element = self.peek()

        if element is None:
            raise ProtocolError('expected %s, found the end of %s' % (describe(expected), self._where()))

        if element.tag != expected:
            raise ProtocolError('expected %s, found %s' % (describe(expected), describe(element.tag)))

        self._stack[-1].advance()
        children = [child for child in element if isinstance(child.tag, str)]
        self._stack.append(_Frame(element, children))
        return element


    def read_attribute(self, name, required=False):
        """ Return the value of the attribute *name* on the current
            element, or None if it is not present and not *required*.
        """

        element = self.current

        if element is None:
            raise ProtocolError('no element is open')

        value = element.get(name)

        if value is None and required:
            raise ProtocolError('%s is missing the %s attribute' % (describe(element.tag), name))

        return value


    def read_value(self):
        """ Return the text content of the current element; an element with
            no text returns an empty string.
        """

        element = self.current

        if element is None:
            raise ProtocolError('no element is open')

        text = element.text
        if text is None:
            text = ''

        return text


    def read_element_value(self, namespace, name):
        """ Consume the element *name*, which must be next, and return its
            text content.
        """

        self.read_start_element(namespace, name)
        value = self.read_value()
        self.read_end_element()
        return value


    def read_end_element(self):
        """ Leave the current element. Every child element must have been
            consumed.
        """

        if len(self._stack) == 1:
            raise ProtocolError('no element is open')

        frame = self._stack[-1]
        leftover = frame.peek()

        if leftover is not None:
            raise ProtocolError('unexpected %s in %s' % (describe(leftover.tag), describe(frame.element.tag)))

        self._stack.pop()


    def _where(self):

        element = self.current

        if element is None:
            return 'the document'

        return describe(element.tag)


# end of class XmlReader


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
