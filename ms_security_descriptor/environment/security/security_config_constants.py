# Created in August 2021
#
# Author: Azaria Zornberg
#
# Copyright 2021 - 2021 Azaria Zornberg
#
# This file is part of ms_security_descriptor
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from enum import Enum, IntEnum


# Constants related to Security Descriptor parsing

# Fixed sizes of the wire structures, in bytes
SECURITY_DESCRIPTOR_HEADER_LEN = 20
ACL_HEADER_LEN = 8
ACE_HEADER_LEN = 4
ACCESS_MASK_LEN = 4
OBJECT_ACE_FLAGS_LEN = 4
GUID_LEN = 16
SID_HEADER_LEN = 8
SID_SUB_AUTHORITY_LEN = 4
SID_IDENTIFIER_AUTHORITY_LEN = 6
SID_MAX_SUB_AUTHORITIES = 15
SID_REVISION = 1

# a basic ACE is a header plus a mask before the SID. an object ACE adds its object flags
BASIC_ACE_FIXED_LEN = ACE_HEADER_LEN + ACCESS_MASK_LEN
OBJECT_ACE_FIXED_LEN = BASIC_ACE_FIXED_LEN + OBJECT_ACE_FLAGS_LEN

# Sacl and Dacl
SACL = 'Sacl'
DACL = 'Dacl'

# Offset constants
OFFSET_OWNER = 'OffsetOwner'
OFFSET_GROUP = 'OffsetGroup'
OFFSET_SACL = 'OffsetSacl'
OFFSET_DACL = 'OffsetDacl'

# SID constants
OWNER_SID = 'OwnerSid'
GROUP_SID = 'GroupSid'
SID = 'Sid'

# ACL constants
ACE_COUNT = 'AceCount'
ACL_REVISION = 'AclRevision'
ACL_SIZE = 'AclSize'

# ACE constants
ACE_FLAGS = 'AceFlags'
ACE_SIZE = 'AceSize'
ACE_TYPE = 'AceType'

# Object authority constants
IDENTIFIER_AUTHORITY = 'IdentifierAuthority'
SUB_AUTHORITY = 'SubAuthority'
SUB_AUTHORITY_COUNT = 'SubAuthorityCount'

# Object type constants
INHERITED_OBJECT_TYPE = 'InheritedObjectType'
OBJECT_TYPE = 'ObjectType'

# General constants
APPLICATION_DATA = 'ApplicationData'
CONTROL = 'Control'
FLAGS = 'Flags'
MASK = 'Mask'
REVISION = 'Revision'
SBZ1 = 'Sbz1'
SBZ2 = 'Sbz2'


class AceType(IntEnum):
    """ The ACE types as they appear in the AceType byte of an ACE header.
    https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/628ebb1d-c509-4ea0-a10f-77ef97ca4586
    """
    ACCESS_ALLOWED = 0x00
    ACCESS_DENIED = 0x01
    SYSTEM_AUDIT = 0x02
    SYSTEM_ALARM = 0x03
    # not documented anywhere and has no body we know how to read
    ACCESS_ALLOWED_COMPOUND = 0x04
    ACCESS_ALLOWED_OBJECT = 0x05
    ACCESS_DENIED_OBJECT = 0x06
    SYSTEM_AUDIT_OBJECT = 0x07
    SYSTEM_ALARM_OBJECT = 0x08
    ACCESS_ALLOWED_CALLBACK = 0x09
    ACCESS_DENIED_CALLBACK = 0x0A
    ACCESS_ALLOWED_CALLBACK_OBJECT = 0x0B
    ACCESS_DENIED_CALLBACK_OBJECT = 0x0C
    SYSTEM_AUDIT_CALLBACK = 0x0D
    SYSTEM_ALARM_CALLBACK = 0x0E
    SYSTEM_AUDIT_CALLBACK_OBJECT = 0x0F
    SYSTEM_ALARM_CALLBACK_OBJECT = 0x10

    @classmethod
    def get_ace_type_for_value(cls, val):
        """ Returns None for types we don't know, rather than raising """
        return ACE_TYPE_VALUE_TO_ENUM.get(val)


ACE_TYPE_VALUE_TO_ENUM = {ace_type.value: ace_type for ace_type in AceType}

# the ACE types whose body is a mask followed by an SID
BASIC_ACE_TYPES = frozenset([
    AceType.ACCESS_ALLOWED,
    AceType.ACCESS_DENIED,
    AceType.SYSTEM_AUDIT,
    AceType.SYSTEM_ALARM,
    AceType.ACCESS_ALLOWED_CALLBACK,
    AceType.ACCESS_DENIED_CALLBACK,
    AceType.SYSTEM_AUDIT_CALLBACK,
    AceType.SYSTEM_ALARM_CALLBACK,
])

# the ACE types whose body is a mask, object flags, optional object type guids, and then an SID
OBJECT_ACE_TYPES = frozenset([
    AceType.ACCESS_ALLOWED_OBJECT,
    AceType.ACCESS_DENIED_OBJECT,
    AceType.SYSTEM_AUDIT_OBJECT,
    AceType.SYSTEM_ALARM_OBJECT,
    AceType.ACCESS_ALLOWED_CALLBACK_OBJECT,
    AceType.ACCESS_DENIED_CALLBACK_OBJECT,
    AceType.SYSTEM_AUDIT_CALLBACK_OBJECT,
    AceType.SYSTEM_ALARM_CALLBACK_OBJECT,
])

# callback ACEs may carry application data after the SID
CALLBACK_ACE_TYPES = frozenset([
    AceType.ACCESS_ALLOWED_CALLBACK,
    AceType.ACCESS_DENIED_CALLBACK,
    AceType.ACCESS_ALLOWED_CALLBACK_OBJECT,
    AceType.ACCESS_DENIED_CALLBACK_OBJECT,
    AceType.SYSTEM_AUDIT_CALLBACK,
    AceType.SYSTEM_ALARM_CALLBACK,
    AceType.SYSTEM_AUDIT_CALLBACK_OBJECT,
    AceType.SYSTEM_ALARM_CALLBACK_OBJECT,
])


# ACE header flags
# https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/628ebb1d-c509-4ea0-a10f-77ef97ca4586
OBJECT_INHERIT_ACE = 0x01
CONTAINER_INHERIT_ACE = 0x02
NO_PROPAGATE_INHERIT_ACE = 0x04
INHERIT_ONLY_ACE = 0x08
INHERITED_ACE = 0x10
SUCCESSFUL_ACCESS_ACE_FLAG = 0x40
FAILED_ACCESS_ACE_FLAG = 0x80

# Object ACE flags, saying which of the object type guids are present
ACE_OBJECT_TYPE_PRESENT = 0x01
ACE_INHERITED_OBJECT_TYPE_PRESENT = 0x02


# Access mask bits
# https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/7a53f60e-e730-4dfe-bbe9-b21b62eb790b
GENERIC_READ = 0x80000000
GENERIC_WRITE = 0x40000000
GENERIC_EXECUTE = 0x20000000
GENERIC_ALL = 0x10000000
MAXIMUM_ALLOWED = 0x02000000
ACCESS_SYSTEM_SECURITY = 0x01000000
SYNCHRONIZE = 0x00100000
WRITE_OWNER = 0x00080000
WRITE_DACL = 0x00040000
READ_CONTROL = 0x00020000
DELETE = 0x00010000

# These are the directory service specific rights. They're valid on object ACEs as well as
# on basic ACEs attached to directory objects.
ADS_RIGHT_DS_CONTROL_ACCESS = 0x00000100
ADS_RIGHT_DS_LIST_OBJECT = 0x00000080
ADS_RIGHT_DS_DELETE_TREE = 0x00000040
ADS_RIGHT_DS_WRITE_PROP = 0x00000020
ADS_RIGHT_DS_READ_PROP = 0x00000010
ADS_RIGHT_DS_SELF = 0x00000008
ADS_RIGHT_ACTRL_DS_LIST = 0x00000004
ADS_RIGHT_DS_DELETE_CHILD = 0x00000002
ADS_RIGHT_DS_CREATE_CHILD = 0x00000001

# human readable names for the mask bits, in ascending bit order
ACCESS_MASK_NAMES = [
    (ADS_RIGHT_DS_CREATE_CHILD, 'CREATE_CHILD'),
    (ADS_RIGHT_DS_DELETE_CHILD, 'DELETE_CHILD'),
    (ADS_RIGHT_ACTRL_DS_LIST, 'LIST_CHILDREN'),
    (ADS_RIGHT_DS_SELF, 'SELF'),
    (ADS_RIGHT_DS_READ_PROP, 'READ_PROP'),
    (ADS_RIGHT_DS_WRITE_PROP, 'WRITE_PROP'),
    (ADS_RIGHT_DS_DELETE_TREE, 'DELETE_TREE'),
    (ADS_RIGHT_DS_LIST_OBJECT, 'LIST_OBJECT'),
    (ADS_RIGHT_DS_CONTROL_ACCESS, 'CONTROL_ACCESS'),
    (DELETE, 'DELETE'),
    (READ_CONTROL, 'READ_CONTROL'),
    (WRITE_DACL, 'WRITE_DACL'),
    (WRITE_OWNER, 'WRITE_OWNER'),
    (SYNCHRONIZE, 'SYNCHRONIZE'),
    (ACCESS_SYSTEM_SECURITY, 'SYSTEM_SECURITY'),
    (MAXIMUM_ALLOWED, 'MAXIMUM_ALLOWED'),
    (GENERIC_ALL, 'GENERIC_ALL'),
    (GENERIC_EXECUTE, 'GENERIC_EXECUTE'),
    (GENERIC_WRITE, 'GENERIC_WRITE'),
    (GENERIC_READ, 'GENERIC_READ'),
]


# Security descriptor control bits
# https://docs.microsoft.com/en-us/windows/win32/secauthz/security-descriptor-control
SE_OWNER_DEFAULTED = 0x0001
SE_GROUP_DEFAULTED = 0x0002
SE_DACL_PRESENT = 0x0004
SE_DACL_DEFAULTED = 0x0008
SE_SACL_PRESENT = 0x0010
SE_SACL_DEFAULTED = 0x0020
SE_DACL_AUTO_INHERIT_REQ = 0x0100
SE_SACL_AUTO_INHERIT_REQ = 0x0200
SE_DACL_AUTO_INHERITED = 0x0400
SE_SACL_AUTO_INHERITED = 0x0800
SE_DACL_PROTECTED = 0x1000
SE_SACL_PROTECTED = 0x2000
SE_RM_CONTROL_VALID = 0x4000
SE_SELF_RELATIVE = 0x8000


# Some "well known SIDs" that people may want to use.
# These are independent of any actual domain or machine
# see: https://docs.microsoft.com/en-us/windows/win32/secauthz/well-known-sids
# also see: https://docs.microsoft.com/en-us/windows/security/identity-protection/access-control/security-identifiers


class WellKnownSID(Enum):
    # The first 5 are universally well known even outside of windows, while the later ones are
    # only well-known within the windows security model
    NULL = 'S-1-0-0'
    EVERYONE = 'S-1-1-0'
    # the following refer to the user/computer that created an object and the primary group SID
    # of that user/computer
    CREATOR_OWNER = 'S-1-3-0'
    CREATOR_GROUP = 'S-1-3-1'
    OWNER_RIGHTS = 'S-1-3-4'

    # the following all exist within the windows NT authority (S-1-5)
    NETWORK = 'S-1-5-2'
    INTERACTIVE = 'S-1-5-4'
    SERVICE = 'S-1-5-6'  # accounts authorized to act as a service
    ANONYMOUS = 'S-1-5-7'  # anonymous users (e.g. an ldap session bound with no user/password)
    ENTERPRISE_CONTROLLERS = 'S-1-5-9'
    SELF = 'S-1-5-10'  # referring to an object's self
    AUTHENTICATED_USERS = 'S-1-5-11'  # does not include guest accounts
    RESTRICTED_CODE = 'S-1-5-12'
    LOCAL_OS = 'S-1-5-18'  # The operating system
    LOCAL_SERVICE = 'S-1-5-19'
    NETWORK_SERVICE = 'S-1-5-20'
    WRITE_RESTRICTED_CODE = 'S-1-5-33'

    # built in groups
    ADMINISTRATORS_BUILT_IN_GROUP = 'S-1-5-32-544'
    USERS_BUILT_IN_GROUP = 'S-1-5-32-545'
    GUESTS_BUILT_IN_GROUP = 'S-1-5-32-546'
    POWER_USERS_BUILT_IN_GROUP = 'S-1-5-32-547'
    ACCOUNT_OPERATORS_BUILT_IN_GROUP = 'S-1-5-32-548'
    SERVER_OPERATORS_BUILT_IN_GROUP = 'S-1-5-32-549'
    PRINT_OPERATORS_BUILT_IN_GROUP = 'S-1-5-32-550'
    BACKUP_OPERATORS_BUILT_IN_GROUP = 'S-1-5-32-551'
    REPLICATORS_BUILT_IN_GROUP = 'S-1-5-32-552'
    PRE_WINDOWS_2000_COMPATIBLE_ACCESS_BUILT_IN_GROUP = 'S-1-5-32-554'
    REMOTE_DESKTOP_USERS_BUILT_IN_GROUP = 'S-1-5-32-555'
    NETWORK_CONFIG_OPERATORS_BUILT_IN_GROUP = 'S-1-5-32-556'
    PERFORMANCE_MONITOR_USERS_BUILT_IN_GROUP = 'S-1-5-32-558'
    PERFORMANCE_LOG_USERS_BUILT_IN_GROUP = 'S-1-5-32-559'
    IIS_USERS_BUILT_IN_GROUP = 'S-1-5-32-568'
    CRYPTOGRAPHIC_OPERATORS_BUILT_IN_GROUP = 'S-1-5-32-569'
    EVENT_LOG_READERS_BUILT_IN_GROUP = 'S-1-5-32-573'
    CERTIFICATE_SERVICE_DCOM_ACCESS_BUILT_IN_GROUP = 'S-1-5-32-574'
    HYPER_V_ADMINS_BUILT_IN_GROUP = 'S-1-5-32-578'
    ACCESS_CONTROL_ASSISTANCE_OPERATORS_BUILT_IN_GROUP = 'S-1-5-32-579'
    REMOTE_MANAGEMENT_USERS_BUILT_IN_GROUP = 'S-1-5-32-580'

    # app containers and integrity levels
    ALL_APP_PACKAGES = 'S-1-15-2-1'
    LOW_INTEGRITY_LEVEL = 'S-1-16-4096'
    MEDIUM_INTEGRITY_LEVEL = 'S-1-16-8192'
    MEDIUM_PLUS_INTEGRITY_LEVEL = 'S-1-16-8448'
    HIGH_INTEGRITY_LEVEL = 'S-1-16-12288'
    SYSTEM_INTEGRITY_LEVEL = 'S-1-16-16384'
