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

""" Helpers for laying out security descriptors byte by byte, so tests can describe exactly
what is on the wire rather than relying on the decoder under test to produce it.
"""
import uuid

from struct import pack


def build_sid(authority, sub_authorities, revision=1, sub_authority_count=None):
    if sub_authority_count is None:
        sub_authority_count = len(sub_authorities)
    data = pack('<BB', revision, sub_authority_count) + authority.to_bytes(6, 'big')
    for sub_authority in sub_authorities:
        data += pack('<L', sub_authority)
    return data


def build_sid_from_string(sid_str):
    items = sid_str.split('-')
    return build_sid(int(items[2]), [int(item) for item in items[3:]], revision=int(items[1]))


def guid_bytes(guid_str):
    return uuid.UUID(guid_str).bytes_le


def build_ace(ace_type, ace_flags, mask, sid, application_data=b'', size=None):
    body = pack('<L', mask) + sid + application_data
    if size is None:
        size = 4 + len(body)
    return pack('<BBH', ace_type, ace_flags, size) + body


def build_object_ace(ace_type, ace_flags, mask, sid, object_type=None, inherited_object_type=None,
                     application_data=b'', object_flags=None, size=None):
    if object_flags is None:
        object_flags = 0
        if object_type is not None:
            object_flags |= 0x1
        if inherited_object_type is not None:
            object_flags |= 0x2
    body = pack('<LL', mask, object_flags)
    if object_type is not None:
        body += guid_bytes(object_type)
    if inherited_object_type is not None:
        body += guid_bytes(inherited_object_type)
    body += sid + application_data
    if size is None:
        size = 4 + len(body)
    return pack('<BBH', ace_type, ace_flags, size) + body


def build_acl(aces, revision=2, size=None, count=None):
    data = b''.join(aces)
    if size is None:
        size = 8 + len(data)
    if count is None:
        count = len(aces)
    return pack('<BBHHH', revision, 0, size, count, 0) + data


def build_security_descriptor(owner, group, dacl=None, sacl=None, control=0x8004, revision=1,
                              sacl_first=True, sids_first=False):
    """ Lay out the header, then the ACLs, then the owner and group, filling in offsets to match.
    With sids_first the owner and group come right after the header instead.
    """
    body = b''
    if sids_first:
        body = owner + group
    offsets = {'sacl': 0, 'dacl': 0}
    acls = [('sacl', sacl), ('dacl', dacl)]
    if not sacl_first:
        acls.reverse()
    for name, acl in acls:
        if acl is not None:
            offsets[name] = 20 + len(body)
            body += acl
    if sids_first:
        owner_offset = 20
        group_offset = 20 + len(owner)
    else:
        owner_offset = 20 + len(body)
        body += owner
        group_offset = 20 + len(body)
        body += group
    header = pack('<BBHLLLL', revision, 0, control, owner_offset, group_offset, offsets['sacl'],
                  offsets['dacl'])
    return header + body
