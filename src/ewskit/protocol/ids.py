""" Folder identifiers, and the ordered collection used to address several
    folders in a single request. The order of a :class:`FolderIdCollection`
    matters: the remote service answers with one response message per
    identifier, in the same order.
"""

from ..errors import ValidationError, VersionError
from . import fields
from .enums import DistinguishedFolder, ServerVersion, XmlNamespace


class FolderId:
    """ An opaque folder identifier assigned by the remote service, with an
        optional *change_key* identifying a specific version of the folder.
        Instances are immutable and hashable.
    """

    def __init__(self, id, change_key=None):

        self._id = id
        self._change_key = change_key


    @property
    def id(self):
        return self._id


    @property
    def change_key(self):
        return self._change_key


    def __eq__(self, other):
        if isinstance(other, FolderId):
            return self._id == other._id and self._change_key == other._change_key
        return NotImplemented


    def __hash__(self):
        return hash((FolderId, self._id, self._change_key))


    def __repr__(self):
        if self._change_key is None:
            return 'FolderId(%r)' % (self._id,)
        return 'FolderId(%r, change_key=%r)' % (self._id, self._change_key)


    def validate(self, version):
        """ A folder id is valid for any version, as long as it is set.
        """

        if self._id is None or str(self._id).strip() == '':
            raise ValidationError('the folder id is blank', parameter='id')


    def write_to_xml(self, writer):
        writer.write_start_element(XmlNamespace.TYPES, fields.FOLDER_ID)
        writer.write_attribute(fields.ID, self._id)
        writer.write_attribute(fields.CHANGE_KEY, self._change_key)
        writer.write_end_element()


# end of class FolderId



class DistinguishedFolderId:
    """ A well-known folder, addressed by name rather than by id; the
        optional *mailbox* is the SMTP address of a mailbox other than the
        caller's own. Some folders only exist in later protocol versions,
        which is enforced by :func:`validate`.
    """

    def __init__(self, folder, mailbox=None):

        self._folder = DistinguishedFolder.parse(folder)
        self._mailbox = mailbox


    @property
    def folder(self):
        return self._folder


    @property
    def mailbox(self):
        return self._mailbox


    def __eq__(self, other):
        if isinstance(other, DistinguishedFolderId):
            return self._folder == other._folder and self._mailbox == other._mailbox
        return NotImplemented


    def __hash__(self):
        return hash((DistinguishedFolderId, self._folder, self._mailbox))


    def __repr__(self):
        if self._mailbox is None:
            return 'DistinguishedFolderId(%r)' % (self._folder.wire_name,)
        return 'DistinguishedFolderId(%r, mailbox=%r)' % (self._folder.wire_name, self._mailbox)


    def validate(self, version):

        version = ServerVersion.parse(version)
        required = self._folder.minimum_version

        if version < required:
            message = "folder '%s' requires %s or later, session is %s"
            message = message % (self._folder.wire_name, required.wire_name, version.wire_name)
            raise VersionError(message, required, version, parameter='folder')


    def write_to_xml(self, writer):
        writer.write_start_element(XmlNamespace.TYPES, fields.DISTINGUISHED_FOLDER_ID)
        writer.write_attribute(fields.ID, self._folder)

        if self._mailbox:
            writer.write_start_element(XmlNamespace.TYPES, fields.MAILBOX)
            writer.write_element_value(XmlNamespace.TYPES, fields.EMAIL_ADDRESS, self._mailbox)
            writer.write_end_element()

        writer.write_end_element()


# end of class DistinguishedFolderId



def folder_id(value):
    """ Normalize *value* to a :class:`FolderId` or
        :class:`DistinguishedFolderId`. A :class:`DistinguishedFolder` member
        becomes a distinguished id; any other string is taken to be an
        opaque folder id.
    """

    if isinstance(value, (FolderId, DistinguishedFolderId)):
        return value

    if isinstance(value, DistinguishedFolder):
        return DistinguishedFolderId(value)

    if isinstance(value, str):
        return FolderId(value)

    raise TypeError('not a folder identifier: ' + repr(value))



class FolderIdCollection:
    """ An ordered collection of folder identifiers. Adding an identifier
        that is already present is ignored, unless the collection is
        *strict*, in which case it raises a
        :class:`ewskit.errors.ValidationError`.
    """

    def __init__(self, ids=(), strict=False):

        self.strict = strict
        self._ids = list()
        self._seen = set()

        self.extend(ids)


    def __contains__(self, value):
        try:
            value = folder_id(value)
        except TypeError:
            return False
        return value in self._seen


    def __getitem__(self, index):
        return self._ids[index]


    def __iter__(self):
        return iter(self._ids)


    def __len__(self):
        return len(self._ids)


    def __repr__(self):
        return 'FolderIdCollection(%r)' % (self._ids,)


    def add(self, value):
        """ Append an identifier, returning the normalized identifier that
            was added.
        """

        value = folder_id(value)

        if value in self._seen:
            if self.strict:
                raise ValidationError('duplicate folder id: ' + repr(value), parameter='folder_ids')
            return value

        self._ids.append(value)
        self._seen.add(value)
        return value


    def extend(self, values):
        """ Append each identifier in *values*. A single identifier is
            accepted as well, and is not iterated over.
        """

        if isinstance(values, (str, FolderId, DistinguishedFolderId, DistinguishedFolder)):
            values = (values,)

        for value in values:
            self.add(value)


    def remove(self, value):
        value = folder_id(value)
        self._ids.remove(value)
        self._seen.discard(value)


    def clear(self):
        self._ids = list()
        self._seen = set()


    def validate(self, version, required=True):
        """ Confirm every identifier in the collection is valid for the
            given protocol *version*. An empty collection is a validation
            error if the collection is *required*.
        """

        if required and len(self._ids) == 0:
            raise ValidationError('at least one folder id must be specified', parameter='folder_ids')

        for value in self._ids:
            value.validate(version)


    def write_to_xml(self, writer, namespace, element_name):
        """ Write a single *element_name* wrapper containing every
            identifier, in insertion order.
        """

        writer.write_start_element(namespace, element_name)

        for value in self._ids:
            value.write_to_xml(writer)

        writer.write_end_element()


# end of class FolderIdCollection


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
