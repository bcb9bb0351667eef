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

""" Rendering of decoded security structures as Security Descriptor Definition Language strings.
https://docs.microsoft.com/en-us/windows/win32/secauthz/security-descriptor-string-format

Rendering is deterministic: flags, rights, and control bits are always written in the order of
the tables in sddl_constants. Bits that have no abbreviation are not written at all.

These functions only rely on the accessors of the decoded structures, so that the structures
themselves can call into this module.
"""
from typing import List, Tuple

from ms_security_descriptor.environment.security.sddl_constants import (
    ACCESS_RIGHTS_SDDL,
    ACE_FLAGS_SDDL,
    ACE_TYPE_SDDL,
    DACL_CONTROL_SDDL,
    SACL_CONTROL_SDDL,
    SDDL_ACE_FORMAT,
    SDDL_DACL_PREFIX,
    SDDL_GROUP_PREFIX,
    SDDL_OWNER_PREFIX,
    SDDL_SACL_PREFIX,
    WELL_KNOWN_SID_SDDL,
)
from ms_security_descriptor.environment.security.security_config_constants import AceType


def _bits_to_sddl(value: int, table: List[Tuple[int, str]]) -> str:
    return ''.join(abbreviation for bit, abbreviation in table if value & bit == bit)


def ace_type_to_sddl(ace_type_value: int) -> str:
    """ Types that SDDL has no abbreviation for (or that we don't know) are written as nothing """
    ace_type = AceType.get_ace_type_for_value(ace_type_value)
    if ace_type is None:
        return ''
    return ACE_TYPE_SDDL.get(ace_type, '')


def ace_flags_to_sddl(flags: int) -> str:
    return _bits_to_sddl(flags, ACE_FLAGS_SDDL)


def access_mask_to_sddl(mask: int) -> str:
    return _bits_to_sddl(mask, ACCESS_RIGHTS_SDDL)


def dacl_control_to_sddl(control: int) -> str:
    return _bits_to_sddl(control, DACL_CONTROL_SDDL)


def sacl_control_to_sddl(control: int) -> str:
    return _bits_to_sddl(control, SACL_CONTROL_SDDL)


def sid_to_sddl(sid) -> str:
    """ Well known SIDs are written as their two letter abbreviation, everything else in
    S-R-I-S... form. The empty SID is written as nothing.
    """
    sid_str = sid.to_canonical_string_format()
    return WELL_KNOWN_SID_SDDL.get(sid_str, sid_str)


def guid_to_sddl(guid) -> str:
    if guid is None:
        return ''
    return guid.to_canonical_string_format()


def ace_to_sddl(ace) -> str:
    """ Render an ACE as (type;flags;rights;object_guid;inherited_object_guid;sid) """
    return SDDL_ACE_FORMAT.format(ace_type=ace_type_to_sddl(ace.get_type_value()),
                                  flags=ace_flags_to_sddl(ace.get_flags_value()),
                                  rights=access_mask_to_sddl(int(ace.get_mask())),
                                  object_guid=guid_to_sddl(ace.get_object_type()),
                                  inherited_object_guid=guid_to_sddl(ace.get_inherited_object_type()),
                                  sid=sid_to_sddl(ace.get_principal()))


def acl_to_sddl(acl, control_sddl: str = '', prefix: str = SDDL_DACL_PREFIX) -> str:
    """ Render an ACL as its prefix, the control abbreviations that apply to it, and then each
    ACE in the order it was encoded.
    """
    return prefix + control_sddl + ''.join(ace_to_sddl(ace) for ace in acl.aces)


def security_descriptor_to_sddl(security_descriptor) -> str:
    """ Render a whole descriptor as O:<owner>G:<group>D:<dacl>S:<sacl>.
    The DACL and SACL sections are only written if the descriptor had them.
    """
    control = security_descriptor.get_control()
    sddl = (SDDL_OWNER_PREFIX + sid_to_sddl(security_descriptor.get_owner())
            + SDDL_GROUP_PREFIX + sid_to_sddl(security_descriptor.get_group()))
    dacl = security_descriptor.get_dacl()
    if dacl is not None:
        sddl += acl_to_sddl(dacl, dacl_control_to_sddl(control), SDDL_DACL_PREFIX)
    sacl = security_descriptor.get_sacl()
    if sacl is not None:
        sddl += acl_to_sddl(sacl, sacl_control_to_sddl(control), SDDL_SACL_PREFIX)
    return sddl
