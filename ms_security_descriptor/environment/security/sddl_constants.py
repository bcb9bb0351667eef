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

""" Abbreviation tables for rendering security descriptors in the Security Descriptor
Definition Language (SDDL).
https://docs.microsoft.com/en-us/windows/win32/secauthz/security-descriptor-string-format

The flag, right, and control tables are lists rather than dicts because the order of the
list is the order the abbreviations are written in. These are never mutated.
"""
from ms_security_descriptor.environment.security.security_config_constants import (
    ADS_RIGHT_ACTRL_DS_LIST,
    ADS_RIGHT_DS_CONTROL_ACCESS,
    ADS_RIGHT_DS_CREATE_CHILD,
    ADS_RIGHT_DS_DELETE_CHILD,
    ADS_RIGHT_DS_DELETE_TREE,
    ADS_RIGHT_DS_LIST_OBJECT,
    ADS_RIGHT_DS_READ_PROP,
    ADS_RIGHT_DS_SELF,
    ADS_RIGHT_DS_WRITE_PROP,
    CONTAINER_INHERIT_ACE,
    DELETE,
    FAILED_ACCESS_ACE_FLAG,
    GENERIC_ALL,
    GENERIC_EXECUTE,
    GENERIC_READ,
    GENERIC_WRITE,
    INHERIT_ONLY_ACE,
    INHERITED_ACE,
    NO_PROPAGATE_INHERIT_ACE,
    OBJECT_INHERIT_ACE,
    READ_CONTROL,
    SE_DACL_AUTO_INHERIT_REQ,
    SE_DACL_AUTO_INHERITED,
    SE_DACL_PROTECTED,
    SE_SACL_AUTO_INHERIT_REQ,
    SE_SACL_AUTO_INHERITED,
    SE_SACL_PROTECTED,
    SUCCESSFUL_ACCESS_ACE_FLAG,
    WRITE_DACL,
    WRITE_OWNER,
    AceType,
    WellKnownSID,
)

# Prefixes for each section of a descriptor string
SDDL_OWNER_PREFIX = 'O:'
SDDL_GROUP_PREFIX = 'G:'
SDDL_DACL_PREFIX = 'D:'
SDDL_SACL_PREFIX = 'S:'

SDDL_ACE_FORMAT = '({ace_type};{flags};{rights};{object_guid};{inherited_object_guid};{sid})'

# types without a defined string form are written as empty strings
ACE_TYPE_SDDL = {
    AceType.ACCESS_ALLOWED: 'A',
    AceType.ACCESS_DENIED: 'D',
    AceType.SYSTEM_AUDIT: 'AU',
    AceType.SYSTEM_ALARM: 'AL',
    AceType.ACCESS_ALLOWED_COMPOUND: '',
    AceType.ACCESS_ALLOWED_OBJECT: 'OA',
    AceType.ACCESS_DENIED_OBJECT: 'OD',
    AceType.SYSTEM_AUDIT_OBJECT: 'OU',
    AceType.SYSTEM_ALARM_OBJECT: 'OL',
    AceType.ACCESS_ALLOWED_CALLBACK: 'XA',
    AceType.ACCESS_DENIED_CALLBACK: 'XD',
    AceType.ACCESS_ALLOWED_CALLBACK_OBJECT: '',
    AceType.ACCESS_DENIED_CALLBACK_OBJECT: '',
    AceType.SYSTEM_AUDIT_CALLBACK: 'XU',
    AceType.SYSTEM_ALARM_CALLBACK: '',
    AceType.SYSTEM_AUDIT_CALLBACK_OBJECT: '',
    AceType.SYSTEM_ALARM_CALLBACK_OBJECT: '',
}

ACE_FLAGS_SDDL = [
    (OBJECT_INHERIT_ACE, 'OI'),
    (CONTAINER_INHERIT_ACE, 'CI'),
    (NO_PROPAGATE_INHERIT_ACE, 'NP'),
    (INHERIT_ONLY_ACE, 'IO'),
    (INHERITED_ACE, 'ID'),
    (SUCCESSFUL_ACCESS_ACE_FLAG, 'SA'),
    (FAILED_ACCESS_ACE_FLAG, 'FA'),
]

ACCESS_RIGHTS_SDDL = [
    (ADS_RIGHT_DS_CREATE_CHILD, 'CC'),
    (ADS_RIGHT_DS_DELETE_CHILD, 'DC'),
    (ADS_RIGHT_ACTRL_DS_LIST, 'LC'),
    (ADS_RIGHT_DS_SELF, 'SW'),
    (ADS_RIGHT_DS_READ_PROP, 'RP'),
    (ADS_RIGHT_DS_WRITE_PROP, 'WP'),
    (ADS_RIGHT_DS_DELETE_TREE, 'DT'),
    (ADS_RIGHT_DS_LIST_OBJECT, 'LO'),
    (ADS_RIGHT_DS_CONTROL_ACCESS, 'CR'),
    (DELETE, 'SD'),
    (READ_CONTROL, 'RC'),
    (WRITE_DACL, 'WD'),
    (WRITE_OWNER, 'WO'),
    (GENERIC_ALL, 'GA'),
    (GENERIC_EXECUTE, 'GX'),
    (GENERIC_WRITE, 'GW'),
    (GENERIC_READ, 'GR'),
]

# descriptor control bits that get written right after the D: or S: prefix
DACL_CONTROL_SDDL = [
    (SE_DACL_AUTO_INHERIT_REQ, 'AR'),
    (SE_DACL_AUTO_INHERITED, 'AI'),
    (SE_DACL_PROTECTED, 'P'),
]

SACL_CONTROL_SDDL = [
    (SE_SACL_AUTO_INHERIT_REQ, 'AR'),
    (SE_SACL_AUTO_INHERITED, 'AI'),
    (SE_SACL_PROTECTED, 'P'),
]

# SDDL only abbreviates exact matches. Domain relative SIDs like domain admins are left alone
# since we don't know the domain.
WELL_KNOWN_SID_SDDL = {
    WellKnownSID.EVERYONE.value: 'WD',
    WellKnownSID.CREATOR_OWNER.value: 'CO',
    WellKnownSID.CREATOR_GROUP.value: 'CG',
    WellKnownSID.OWNER_RIGHTS.value: 'OW',
    WellKnownSID.NETWORK.value: 'NU',
    WellKnownSID.INTERACTIVE.value: 'IU',
    WellKnownSID.SERVICE.value: 'SU',
    WellKnownSID.ANONYMOUS.value: 'AN',
    WellKnownSID.ENTERPRISE_CONTROLLERS.value: 'ED',
    WellKnownSID.SELF.value: 'PS',
    WellKnownSID.AUTHENTICATED_USERS.value: 'AU',
    WellKnownSID.RESTRICTED_CODE.value: 'RC',
    WellKnownSID.LOCAL_OS.value: 'SY',
    WellKnownSID.LOCAL_SERVICE.value: 'LS',
    WellKnownSID.NETWORK_SERVICE.value: 'NS',
    WellKnownSID.WRITE_RESTRICTED_CODE.value: 'WR',
    WellKnownSID.ADMINISTRATORS_BUILT_IN_GROUP.value: 'BA',
    WellKnownSID.USERS_BUILT_IN_GROUP.value: 'BU',
    WellKnownSID.GUESTS_BUILT_IN_GROUP.value: 'BG',
    WellKnownSID.POWER_USERS_BUILT_IN_GROUP.value: 'PU',
    WellKnownSID.ACCOUNT_OPERATORS_BUILT_IN_GROUP.value: 'AO',
    WellKnownSID.SERVER_OPERATORS_BUILT_IN_GROUP.value: 'SO',
    WellKnownSID.PRINT_OPERATORS_BUILT_IN_GROUP.value: 'PO',
    WellKnownSID.BACKUP_OPERATORS_BUILT_IN_GROUP.value: 'BO',
    WellKnownSID.REPLICATORS_BUILT_IN_GROUP.value: 'RE',
    WellKnownSID.PRE_WINDOWS_2000_COMPATIBLE_ACCESS_BUILT_IN_GROUP.value: 'RU',
    WellKnownSID.REMOTE_DESKTOP_USERS_BUILT_IN_GROUP.value: 'RD',
    WellKnownSID.NETWORK_CONFIG_OPERATORS_BUILT_IN_GROUP.value: 'NO',
    WellKnownSID.PERFORMANCE_MONITOR_USERS_BUILT_IN_GROUP.value: 'MY',
    WellKnownSID.PERFORMANCE_LOG_USERS_BUILT_IN_GROUP.value: 'LU',
    WellKnownSID.IIS_USERS_BUILT_IN_GROUP.value: 'IS',
    WellKnownSID.CRYPTOGRAPHIC_OPERATORS_BUILT_IN_GROUP.value: 'CY',
    WellKnownSID.EVENT_LOG_READERS_BUILT_IN_GROUP.value: 'ER',
    WellKnownSID.CERTIFICATE_SERVICE_DCOM_ACCESS_BUILT_IN_GROUP.value: 'CD',
    WellKnownSID.HYPER_V_ADMINS_BUILT_IN_GROUP.value: 'HA',
    WellKnownSID.ACCESS_CONTROL_ASSISTANCE_OPERATORS_BUILT_IN_GROUP.value: 'AA',
    WellKnownSID.REMOTE_MANAGEMENT_USERS_BUILT_IN_GROUP.value: 'RM',
    WellKnownSID.ALL_APP_PACKAGES.value: 'AC',
    WellKnownSID.LOW_INTEGRITY_LEVEL.value: 'LW',
    WellKnownSID.MEDIUM_INTEGRITY_LEVEL.value: 'ME',
    WellKnownSID.MEDIUM_PLUS_INTEGRITY_LEVEL.value: 'MP',
    WellKnownSID.HIGH_INTEGRITY_LEVEL.value: 'HI',
    WellKnownSID.SYSTEM_INTEGRITY_LEVEL.value: 'SI',
}
