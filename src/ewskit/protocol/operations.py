""" Concrete operation descriptors. Each one is a thin description of a
    single request type: its element names, the version that introduced
    it, how many response messages to expect, and how to write its
    payload.
"""

from ..errors import ValidationError
from . import fields
from .enums import DeleteMode, ErrorHandling, ServerVersion, XmlNamespace
from .ids import FolderIdCollection, folder_id
from .operation import Operation, require


class DeleteUserConfiguration(Operation):
    """ Delete the user configuration object *name* stored in the folder
        *parent_folder_id*. The remote service always answers with exactly
        one response message, and any error it reports is raised.
    """

    element_name = fields.DELETE_USER_CONFIGURATION
    response_element_name = fields.DELETE_USER_CONFIGURATION_RESPONSE
    response_message_element_name = fields.DELETE_USER_CONFIGURATION_RESPONSE_MESSAGE
    minimum_version = ServerVersion.EXCHANGE2010

    def __init__(self, name=None, parent_folder_id=None):

        Operation.__init__(self, ErrorHandling.THROW_ON_ERROR)

        self.name = name
        self.parent_folder_id = parent_folder_id


    def __repr__(self):
        return 'DeleteUserConfiguration(%r, %r)' % (self.name, self.parent_folder_id)


    def expected_response_count(self):
        return 1


    def validate(self, version):

        require(self.name, 'name')
        require(self.parent_folder_id, 'parent_folder_id')

        try:
            parent = folder_id(self.parent_folder_id)
        except TypeError as e:
            raise ValidationError(str(e), parameter='parent_folder_id')

        parent.validate(version)


    def write_elements(self, writer):

        writer.write_start_element(XmlNamespace.MESSAGES, fields.USER_CONFIGURATION_NAME)
        writer.write_attribute(fields.NAME, self.name)
        folder_id(self.parent_folder_id).write_to_xml(writer)
        writer.write_end_element()


# end of class DeleteUserConfiguration



class _FolderDelete(Operation):
    """ Common base for operations that delete folders or folder contents,
        all of which identify the folders with a :class:`FolderIdCollection`
        and answer with one response message per folder, in order. The
        *delete_mode* is written as the DeleteType attribute.
    """

    default_mode = DeleteMode.SOFT_DELETE

    def __init__(self, folder_ids=(), delete_mode=None, error_handling=ErrorHandling.THROW_ON_ERROR):

        Operation.__init__(self, error_handling)

        if delete_mode is None:
            delete_mode = self.default_mode

        if isinstance(folder_ids, FolderIdCollection):
            self.folder_ids = folder_ids
        else:
            self.folder_ids = FolderIdCollection(folder_ids)

        self.delete_mode = DeleteMode(delete_mode)


    def __repr__(self):
        return '%s(%r, %s, %s)' % (self.__class__.__name__, list(self.folder_ids), self.delete_mode.value, self.error_handling.value)


    def expected_response_count(self):
        return len(self.folder_ids)


    def validate(self, version):

        require(self.folder_ids, 'folder_ids')
        self.folder_ids.validate(version)


    def write_attributes(self, writer):
        writer.write_attribute(fields.DELETE_TYPE, self.delete_mode)


    def write_elements(self, writer):
        self.folder_ids.write_to_xml(writer, XmlNamespace.MESSAGES, fields.FOLDER_IDS)


# end of class _FolderDelete



class EmptyFolder(_FolderDelete):
    """ Delete the contents of each folder in *folder_ids*; if
        *delete_sub_folders* is True, subfolders are deleted as well.
    """

    element_name = fields.EMPTY_FOLDER
    response_element_name = fields.EMPTY_FOLDER_RESPONSE
    response_message_element_name = fields.EMPTY_FOLDER_RESPONSE_MESSAGE
    minimum_version = ServerVersion.EXCHANGE2010_SP1
    default_mode = DeleteMode.HARD_DELETE

    def __init__(self, folder_ids=(), delete_mode=None, delete_sub_folders=False, error_handling=ErrorHandling.THROW_ON_ERROR):

        _FolderDelete.__init__(self, folder_ids, delete_mode, error_handling)
        self.delete_sub_folders = bool(delete_sub_folders)


    def write_attributes(self, writer):
        _FolderDelete.write_attributes(self, writer)
        writer.write_attribute(fields.DELETE_SUB_FOLDERS, self.delete_sub_folders)


# end of class EmptyFolder



class DeleteFolder(_FolderDelete):
    """ Delete each folder in *folder_ids*.
    """

    element_name = fields.DELETE_FOLDER
    response_element_name = fields.DELETE_FOLDER_RESPONSE
    response_message_element_name = fields.DELETE_FOLDER_RESPONSE_MESSAGE


# end of class DeleteFolder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
