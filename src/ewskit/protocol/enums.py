""" Enumerated values used on the wire, and in the local handling of
    requests and responses.
"""

import enum


class ServerVersion(enum.IntEnum):
    """ Protocol versions in release order. Comparison between members is
        meaningful: a request that requires :attr:`EXCHANGE2010` can be sent
        to any session negotiated at that version or later.
    """

    EXCHANGE2007_SP1 = 0
    EXCHANGE2010 = 1
    EXCHANGE2010_SP1 = 2
    EXCHANGE2010_SP2 = 3
    EXCHANGE2013 = 4
    EXCHANGE2013_SP1 = 5


    @property
    def wire_name(self):
        """ The name used for this version in the RequestServerVersion
            header, for example ``Exchange2010_SP1``.
        """

        return 'Exchange' + self.name[len('EXCHANGE'):]


    @classmethod
    def parse(cls, value):
        """ Return the member matching *value*, which can be a member, the
            wire name (``Exchange2010_SP1``), or the member name
            (``EXCHANGE2010_SP1``); the comparison is case-insensitive.
        """

        if isinstance(value, cls):
            return value

        normalized = str(value).upper()

        try:
            return cls[normalized]
        except KeyError:
            raise ValueError('unknown server version: ' + repr(value))


class ErrorHandling(enum.Enum):
    """ How a request handles response messages reporting an error.
        THROW_ON_ERROR raises on the first such message; RETURN_ERRORS
        collects them alongside the successes.
    """

    THROW_ON_ERROR = 'ThrowOnError'
    RETURN_ERRORS = 'ReturnErrors'


class ServiceResult(enum.Enum):
    """ The ResponseClass of an individual response message.
    """

    SUCCESS = 'Success'
    WARNING = 'Warning'
    ERROR = 'Error'


class DeleteMode(enum.Enum):

    HARD_DELETE = 'HardDelete'
    SOFT_DELETE = 'SoftDelete'
    MOVE_TO_DELETED_ITEMS = 'MoveToDeletedItems'


class XmlNamespace(enum.Enum):
    """ The XML namespaces used in requests and replies. Each member is a
        (prefix, uri) pair.
    """

    SOAP = ('soap', 'http://schemas.xmlsoap.org/soap/envelope/')
    TYPES = ('t', 'http://schemas.microsoft.com/exchange/services/2006/types')
    MESSAGES = ('m', 'http://schemas.microsoft.com/exchange/services/2006/messages')
    ERRORS = ('e', 'http://schemas.microsoft.com/exchange/services/2006/errors')


    @property
    def prefix(self):
        return self.value[0]


    @property
    def uri(self):
        return self.value[1]


    def tag(self, name):
        """ Return the fully qualified (Clark notation) tag for the element
            *name* in this namespace.
        """

        return '{%s}%s' % (self.uri, name)


    @classmethod
    def nsmap(cls):
        return dict(member.value for member in cls)


class DistinguishedFolder(enum.Enum):
    """ Well-known folders that can be addressed by name instead of by an
        opaque identifier. Each member is a (wire name, minimum version)
        pair; the folder cannot be addressed against an older session.
    """

    CALENDAR = ('calendar', ServerVersion.EXCHANGE2007_SP1)
    CONTACTS = ('contacts', ServerVersion.EXCHANGE2007_SP1)
    DELETED_ITEMS = ('deleteditems', ServerVersion.EXCHANGE2007_SP1)
    DRAFTS = ('drafts', ServerVersion.EXCHANGE2007_SP1)
    INBOX = ('inbox', ServerVersion.EXCHANGE2007_SP1)
    JOURNAL = ('journal', ServerVersion.EXCHANGE2007_SP1)
    JUNK_EMAIL = ('junkemail', ServerVersion.EXCHANGE2007_SP1)
    MSG_FOLDER_ROOT = ('msgfolderroot', ServerVersion.EXCHANGE2007_SP1)
    NOTES = ('notes', ServerVersion.EXCHANGE2007_SP1)
    OUTBOX = ('outbox', ServerVersion.EXCHANGE2007_SP1)
    PUBLIC_FOLDERS_ROOT = ('publicfoldersroot', ServerVersion.EXCHANGE2007_SP1)
    ROOT = ('root', ServerVersion.EXCHANGE2007_SP1)
    SEARCH_FOLDERS = ('searchfolders', ServerVersion.EXCHANGE2007_SP1)
    SENT_ITEMS = ('sentitems', ServerVersion.EXCHANGE2007_SP1)
    TASKS = ('tasks', ServerVersion.EXCHANGE2007_SP1)
    VOICE_MAIL = ('voicemail', ServerVersion.EXCHANGE2007_SP1)
    RECOVERABLE_ITEMS_ROOT = ('recoverableitemsroot', ServerVersion.EXCHANGE2010_SP1)
    RECOVERABLE_ITEMS_DELETIONS = ('recoverableitemsdeletions', ServerVersion.EXCHANGE2010_SP1)
    RECOVERABLE_ITEMS_VERSIONS = ('recoverableitemsversions', ServerVersion.EXCHANGE2010_SP1)
    RECOVERABLE_ITEMS_PURGES = ('recoverableitemspurges', ServerVersion.EXCHANGE2010_SP1)
    ARCHIVE_ROOT = ('archiveroot', ServerVersion.EXCHANGE2010_SP1)
    ARCHIVE_MSG_FOLDER_ROOT = ('archivemsgfolderroot', ServerVersion.EXCHANGE2010_SP1)
    ARCHIVE_DELETED_ITEMS = ('archivedeleteditems', ServerVersion.EXCHANGE2010_SP1)
    SYNC_ISSUES = ('syncissues', ServerVersion.EXCHANGE2013)
    CONFLICTS = ('conflicts', ServerVersion.EXCHANGE2013)
    LOCAL_FAILURES = ('localfailures', ServerVersion.EXCHANGE2013)
    SERVER_FAILURES = ('serverfailures', ServerVersion.EXCHANGE2013)
    RECIPIENT_CACHE = ('recipientcache', ServerVersion.EXCHANGE2013)
    QUICK_CONTACTS = ('quickcontacts', ServerVersion.EXCHANGE2013)
    CONVERSATION_HISTORY = ('conversationhistory', ServerVersion.EXCHANGE2013)
    TODO_SEARCH = ('todosearch', ServerVersion.EXCHANGE2013)


    @property
    def wire_name(self):
        return self.value[0]


    @property
    def minimum_version(self):
        return self.value[1]


    @classmethod
    def parse(cls, value):
        """ Return the member whose wire name or member name matches
            *value*, case-insensitive.
        """

        if isinstance(value, cls):
            return value

        normalized = str(value).lower()

        for member in cls:
            if member.wire_name == normalized:
                return member
            if member.name.lower() == normalized:
                return member

        raise ValueError('unknown distinguished folder: ' + repr(value))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
