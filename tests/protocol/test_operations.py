import pytest

import ewskit
from ewskit.protocol.operation import Operation


V = ewskit.ServerVersion
M = ewskit.ErrorHandling


def test_descriptors():

    operation = ewskit.DeleteUserConfiguration('Cal1', 'F1')

    assert operation.expected_response_count() == 1
    assert operation.minimum_version == V.EXCHANGE2010
    assert operation.error_handling == M.THROW_ON_ERROR
    assert operation.element_name == 'DeleteUserConfiguration'
    assert operation.response_element_name == 'DeleteUserConfigurationResponse'
    assert operation.response_message_element_name == 'DeleteUserConfigurationResponseMessage'

    operation = ewskit.EmptyFolder(['F1', 'F2', 'F1'], error_handling='ReturnErrors')

    assert operation.expected_response_count() == 2
    assert operation.minimum_version == V.EXCHANGE2010_SP1
    assert operation.error_handling == M.RETURN_ERRORS
    assert operation.delete_mode == ewskit.DeleteMode.HARD_DELETE
    assert operation.delete_sub_folders is False

    operation = ewskit.DeleteFolder(['F1'])

    assert operation.expected_response_count() == 1
    assert operation.minimum_version == V.EXCHANGE2007_SP1
    assert operation.delete_mode == ewskit.DeleteMode.SOFT_DELETE


def test_error_handling_is_fixed():

    operation = ewskit.EmptyFolder(['F1'])

    with pytest.raises(AttributeError):
        operation.error_handling = M.RETURN_ERRORS

    with pytest.raises(ValueError):
        ewskit.EmptyFolder(['F1'], error_handling='Sometimes')


def test_shared_collection():

    ids = ewskit.FolderIdCollection(['F1'])
    operation = ewskit.DeleteFolder(ids)

    assert operation.folder_ids is ids

    ids.add('F2')
    assert operation.expected_response_count() == 2


def test_parent_folder_types():

    operation = ewskit.DeleteUserConfiguration('Cal1', 42)

    with pytest.raises(ewskit.ValidationError) as raised:
        operation.validate(V.EXCHANGE2013)

    assert raised.value.parameter == 'parent_folder_id'

    operation = ewskit.DeleteUserConfiguration('Cal1', ewskit.DistinguishedFolder.ARCHIVE_ROOT)

    with pytest.raises(ewskit.VersionError):
        operation.validate(V.EXCHANGE2010)

    operation.validate(V.EXCHANGE2010_SP1)


def test_abstract():

    with pytest.raises(TypeError):
        Operation()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
