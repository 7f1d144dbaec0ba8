"""XML element and attribute names.

Keep these in one place to avoid stringly-typed request and response handling.
"""

# SOAP envelope
ENVELOPE = "Envelope"
HEADER = "Header"
BODY = "Body"
FAULT = "Fault"
FAULT_CODE = "faultcode"
FAULT_STRING = "faultstring"
FAULT_DETAIL = "detail"

# Headers
REQUEST_SERVER_VERSION = "RequestServerVersion"
SERVER_VERSION_INFO = "ServerVersionInfo"

# Response messages
RESPONSE_MESSAGES = "ResponseMessages"
RESPONSE_CODE = "ResponseCode"
MESSAGE_TEXT = "MessageText"
DESCRIPTIVE_LINK_KEY = "DescriptiveLinkKey"
MESSAGE_XML = "MessageXml"
VALUE = "Value"

# Identifiers
FOLDER_ID = "FolderId"
FOLDER_IDS = "FolderIds"
DISTINGUISHED_FOLDER_ID = "DistinguishedFolderId"
MAILBOX = "Mailbox"
EMAIL_ADDRESS = "EmailAddress"

# Operations
DELETE_USER_CONFIGURATION = "DeleteUserConfiguration"
DELETE_USER_CONFIGURATION_RESPONSE = "DeleteUserConfigurationResponse"
DELETE_USER_CONFIGURATION_RESPONSE_MESSAGE = "DeleteUserConfigurationResponseMessage"
USER_CONFIGURATION_NAME = "UserConfigurationName"

EMPTY_FOLDER = "EmptyFolder"
EMPTY_FOLDER_RESPONSE = "EmptyFolderResponse"
EMPTY_FOLDER_RESPONSE_MESSAGE = "EmptyFolderResponseMessage"

DELETE_FOLDER = "DeleteFolder"
DELETE_FOLDER_RESPONSE = "DeleteFolderResponse"
DELETE_FOLDER_RESPONSE_MESSAGE = "DeleteFolderResponseMessage"

# Attributes
VERSION = "Version"
ID = "Id"
CHANGE_KEY = "ChangeKey"
NAME = "Name"
RESPONSE_CLASS = "ResponseClass"
DELETE_TYPE = "DeleteType"
DELETE_SUB_FOLDERS = "DeleteSubFolders"

# Response codes
NO_ERROR = "NoError"
