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

import pytest

from struct import pack

from ms_security_descriptor import ACE, AceType, ObjectSid, parse_security_descriptor
from ms_security_descriptor.environment.security import sddl_utils
from ms_security_descriptor.environment.security.security_config_constants import (
    ADS_RIGHT_DS_CONTROL_ACCESS,
    ADS_RIGHT_DS_READ_PROP,
    ADS_RIGHT_DS_WRITE_PROP,
    CONTAINER_INHERIT_ACE,
    FAILED_ACCESS_ACE_FLAG,
    GENERIC_ALL,
    GENERIC_READ,
    GENERIC_WRITE,
    INHERITED_ACE,
    OBJECT_INHERIT_ACE,
    READ_CONTROL,
    SE_DACL_AUTO_INHERITED,
    SE_DACL_PROTECTED,
    SE_SACL_PROTECTED,
    SYNCHRONIZE,
)
from tests.security_descriptor_builders import (
    build_ace,
    build_acl,
    build_object_ace,
    build_security_descriptor,
    build_sid,
    build_sid_from_string,
)


EVERYONE = build_sid(1, [0])
LOCAL_SYSTEM = build_sid(5, [18])
AUTHENTICATED_USERS = build_sid(5, [11])
DOMAIN_ADMINS_SID = 'S-1-5-21-3623811015-3361044348-30300820-512'
DOMAIN_USERS_SID = 'S-1-5-21-3623811015-3361044348-30300820-513'
FORCE_CHANGE_PASSWORD_GUID = '00299570-246d-11d0-a768-00aa006e0529'
USER_CLASS_GUID = 'bf967aba-0de6-11d0-a285-00aa003049e2'


class TestBitTables:

    @pytest.mark.parametrize('mask, expected', [
        (GENERIC_READ, 'GR'),
        (GENERIC_READ | GENERIC_WRITE | READ_CONTROL, 'RCGWGR'),
        (0x1FF, 'CCDCLCSWRPWPDTLOCR'),
        (ADS_RIGHT_DS_WRITE_PROP | ADS_RIGHT_DS_READ_PROP, 'RPWP'),
        (SYNCHRONIZE, ''),
        (0, ''),
    ])
    def test_access_mask(self, mask, expected):
        assert sddl_utils.access_mask_to_sddl(mask) == expected

    @pytest.mark.parametrize('flags, expected', [
        (OBJECT_INHERIT_ACE | CONTAINER_INHERIT_ACE | INHERITED_ACE, 'OICIID'),
        (INHERITED_ACE | CONTAINER_INHERIT_ACE, 'CIID'),
        (FAILED_ACCESS_ACE_FLAG, 'FA'),
        (0x20, ''),
    ])
    def test_ace_flags(self, flags, expected):
        assert sddl_utils.ace_flags_to_sddl(flags) == expected

    @pytest.mark.parametrize('ace_type, expected', [
        (AceType.ACCESS_ALLOWED, 'A'),
        (AceType.ACCESS_DENIED_OBJECT, 'OD'),
        (AceType.SYSTEM_AUDIT_CALLBACK, 'XU'),
        (AceType.ACCESS_ALLOWED_CALLBACK_OBJECT, ''),
        (0x20, ''),
    ])
    def test_ace_type(self, ace_type, expected):
        assert sddl_utils.ace_type_to_sddl(ace_type) == expected

    def test_control_flags(self):
        control = 0x0100 | SE_DACL_AUTO_INHERITED | SE_DACL_PROTECTED
        assert sddl_utils.dacl_control_to_sddl(control) == 'ARAIP'
        assert sddl_utils.sacl_control_to_sddl(control) == ''
        assert sddl_utils.sacl_control_to_sddl(SE_SACL_PROTECTED) == 'P'


class TestSidToSddl:

    def test_abbreviates_exact_well_known(self):
        assert sddl_utils.sid_to_sddl(ObjectSid(data=EVERYONE)) == 'WD'
        assert sddl_utils.sid_to_sddl(ObjectSid.from_canonical_string('S-1-5-32-544')) == 'BA'

    def test_domain_relative_sids_are_not_abbreviated(self):
        # the resolver knows these, but SDDL abbreviations are exact matches only
        sid = ObjectSid.from_canonical_string(DOMAIN_ADMINS_SID)
        assert sid.resolve() == 'Domain Admins'
        assert sddl_utils.sid_to_sddl(sid) == DOMAIN_ADMINS_SID

    def test_empty_sid(self):
        assert sddl_utils.sid_to_sddl(ObjectSid()) == ''


class TestAceToSddl:

    def test_basic_ace(self):
        ace = ACE(data=build_ace(AceType.ACCESS_ALLOWED, CONTAINER_INHERIT_ACE, GENERIC_READ, EVERYONE))
        assert ace.to_sddl() == '(A;CI;GR;;;WD)'

    def test_object_ace_with_only_object_type(self):
        data = build_object_ace(AceType.ACCESS_ALLOWED_OBJECT, 0, ADS_RIGHT_DS_CONTROL_ACCESS, AUTHENTICATED_USERS,
                                object_type=FORCE_CHANGE_PASSWORD_GUID)
        assert ACE(data=data).to_sddl() == '(OA;;CR;00299570-246d-11d0-a768-00aa006e0529;;AU)'

    def test_object_ace_with_both_guids(self):
        data = build_object_ace(AceType.ACCESS_ALLOWED_OBJECT, CONTAINER_INHERIT_ACE | INHERITED_ACE,
                                ADS_RIGHT_DS_READ_PROP, AUTHENTICATED_USERS, object_type=FORCE_CHANGE_PASSWORD_GUID,
                                inherited_object_type=USER_CLASS_GUID)
        assert ACE(data=data).to_sddl() == ('(OA;CIID;RP;00299570-246d-11d0-a768-00aa006e0529;'
                                            'bf967aba-0de6-11d0-a285-00aa003049e2;AU)')

    def test_callback_ace(self):
        ace = ACE(data=build_ace(AceType.ACCESS_ALLOWED_CALLBACK, 0, GENERIC_ALL, LOCAL_SYSTEM, b'artx'))
        assert ace.to_sddl() == '(XA;;GA;;;SY)'

    def test_unknown_ace(self):
        ace = ACE(data=build_ace(0x20, 0x01, GENERIC_READ, b''))
        assert ace.to_sddl() == '(;OI;GR;;;)'

    def test_rendering_is_stable(self):
        data = build_ace(AceType.ACCESS_DENIED, OBJECT_INHERIT_ACE | CONTAINER_INHERIT_ACE,
                         GENERIC_ALL | GENERIC_READ | READ_CONTROL | 0x1FF, EVERYONE)
        renderings = {ACE(data=data).to_sddl() for _ in range(5)}
        assert renderings == {'(D;OICI;CCDCLCSWRPWPDTLOCRRCGAGR;;;WD)'}


class TestSecurityDescriptorToSddl:

    def test_end_to_end(self):
        dacl = build_acl([build_ace(AceType.ACCESS_ALLOWED, 0, GENERIC_READ, EVERYONE)])
        data = build_security_descriptor(build_sid_from_string(DOMAIN_ADMINS_SID),
                                         build_sid_from_string(DOMAIN_USERS_SID), dacl=dacl)
        sd = parse_security_descriptor(data)
        assert sd.to_sddl() == 'O:{}G:{}D:(A;;GR;;;WD)'.format(DOMAIN_ADMINS_SID, DOMAIN_USERS_SID)

    def test_well_known_owner_and_group_are_abbreviated(self):
        data = build_security_descriptor(build_sid_from_string('S-1-5-32-544'), LOCAL_SYSTEM, dacl=build_acl([]))
        assert parse_security_descriptor(data).to_sddl() == 'O:BAG:SYD:'

    def test_dacl_control_flags_follow_prefix(self):
        dacl = build_acl([
            build_ace(AceType.ACCESS_DENIED, 0, GENERIC_WRITE, EVERYONE),
            build_ace(AceType.ACCESS_ALLOWED, INHERITED_ACE, GENERIC_ALL, LOCAL_SYSTEM),
        ])
        control = 0x8004 | SE_DACL_AUTO_INHERITED | SE_DACL_PROTECTED
        data = build_security_descriptor(LOCAL_SYSTEM, LOCAL_SYSTEM, dacl=dacl, control=control)
        assert parse_security_descriptor(data).to_sddl() == 'O:SYG:SYD:AIP(D;;GW;;;WD)(A;ID;GA;;;SY)'

    def test_sacl_section(self):
        sacl = build_acl([build_ace(AceType.SYSTEM_AUDIT, FAILED_ACCESS_ACE_FLAG, GENERIC_ALL, EVERYONE)])
        dacl = build_acl([build_ace(AceType.ACCESS_ALLOWED, 0, GENERIC_READ, EVERYONE)])
        control = 0x8014 | SE_SACL_PROTECTED
        data = build_security_descriptor(LOCAL_SYSTEM, LOCAL_SYSTEM, dacl=dacl, sacl=sacl, control=control)
        assert parse_security_descriptor(data).to_sddl() == 'O:SYG:SYD:(A;;GR;;;WD)S:P(AU;FA;GA;;;WD)'

    def test_coinciding_owner_and_group(self):
        dacl = build_acl([build_ace(AceType.ACCESS_ALLOWED, 0, GENERIC_READ, EVERYONE)])
        data = build_security_descriptor(b'', b'', dacl=dacl)
        assert parse_security_descriptor(data).to_sddl() == 'O:WDG:WDD:(A;;GR;;;WD)'

    def test_no_dacl(self):
        data = build_security_descriptor(LOCAL_SYSTEM, LOCAL_SYSTEM)
        assert parse_security_descriptor(data).to_sddl() == 'O:SYG:SY'

    def test_acl_to_sddl_with_explicit_prefix(self):
        dacl = build_acl([build_ace(AceType.ACCESS_ALLOWED, 0, GENERIC_READ, EVERYONE)])
        sd = parse_security_descriptor(build_security_descriptor(LOCAL_SYSTEM, LOCAL_SYSTEM, dacl=dacl))
        assert sd.get_dacl().to_sddl() == 'D:(A;;GR;;;WD)'
        assert sd.get_dacl().to_sddl('P', prefix='S:') == 'S:P(A;;GR;;;WD)'

    def test_owner_and_group_before_dacl(self):
        dacl = build_acl([build_ace(AceType.ACCESS_ALLOWED, 0, GENERIC_READ, EVERYONE)])
        data = build_security_descriptor(LOCAL_SYSTEM, LOCAL_SYSTEM, dacl=dacl, sids_first=True)
        assert parse_security_descriptor(data).to_sddl() == 'O:SYG:SYD:(A;;GR;;;WD)'

    def test_absent_owner_and_group(self):
        dacl = build_acl([build_ace(AceType.ACCESS_ALLOWED, 0, GENERIC_READ, EVERYONE)])
        data = pack('<BBHLLLL', 1, 0, 0x8004, 0, 0, 0, 20) + dacl
        assert parse_security_descriptor(data).to_sddl() == 'O:G:D:(A;;GR;;;WD)'

    def test_administrators_owner_with_system_group(self):
        dacl = build_acl([build_ace(AceType.ACCESS_ALLOWED, 0, GENERIC_ALL, LOCAL_SYSTEM)])
        data = build_security_descriptor(build_sid_from_string('S-1-5-32-544'), LOCAL_SYSTEM, dacl=dacl)
        assert parse_security_descriptor(data).to_sddl() == 'O:BAG:SYD:(A;;GA;;;SY)'
