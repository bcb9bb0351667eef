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

""" Security identifiers (SIDs) and object type GUIDs, the two kinds of identifier that appear
inside ACEs and security descriptors, plus resolution of SIDs to friendly names.
"""
import uuid

from ldap3.utils.conv import escape_bytes
from struct import pack
from typing import List, Union

from ms_security_descriptor import logging_utils
from ms_security_descriptor.environment.security.ad_security_guids import get_display_name_for_object_type_guid
from ms_security_descriptor.environment.security.security_config_constants import (
    GUID_LEN,
    IDENTIFIER_AUTHORITY,
    REVISION,
    SID,
    SID_HEADER_LEN,
    SID_IDENTIFIER_AUTHORITY_LEN,
    SID_MAX_SUB_AUTHORITIES,
    SID_REVISION,
    SID_SUB_AUTHORITY_LEN,
    SUB_AUTHORITY,
    SUB_AUTHORITY_COUNT,
)
from ms_security_descriptor.environment.security.structure_utils import ByteCursor, Structure
from ms_security_descriptor.environment.security.well_known_sids import (
    WELL_KNOWN_SID_NAME_PATTERNS,
    WELL_KNOWN_SID_NAMES,
)
from ms_security_descriptor.exceptions import (
    InvalidGuidStringException,
    InvalidSidStringException,
    MalformedSidException,
)


logger = logging_utils.get_logger()

MAX_SUB_AUTHORITY_VALUE = 0xFFFFFFFF
MAX_IDENTIFIER_AUTHORITY_VALUE = 0xFFFFFFFFFFFF


class ObjectSid(Structure):
    """
    SID as described in 2.4.2
    https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/78eb9013-1c3a-4970-ad1f-2b1dad588a25

    The identifier authority is 6 bytes, big-endian. The sub-authorities that follow it are
    little-endian 32 bit integers.

    An ObjectSid with no fields is the "empty" SID. It's what we keep in place of an SID that
    failed to decode, and its canonical string is the empty string.
    """
    structure = (
        (REVISION, '<B'),
        (SUB_AUTHORITY_COUNT, '<B'),
        (IDENTIFIER_AUTHORITY, '{}s'.format(SID_IDENTIFIER_AUTHORITY_LEN)),
    )
    REPR_NAME = 'ObjectSid'

    @classmethod
    def from_cursor(cls, cursor: ByteCursor, length: int) -> 'ObjectSid':
        """ Read an SID that occupies exactly `length` bytes at the cursor.
        The cursor always moves past all `length` bytes, even if the SID turns out to be malformed.
        :raises: TruncatedBufferException if fewer than `length` bytes remain.
        :raises: MalformedSidException if the bytes don't hold a valid SID.
        """
        data = cursor.read(length, SID)
        return cls(data=data)

    @classmethod
    def from_canonical_string(cls, canonical: str) -> 'ObjectSid':
        return cls().from_canonical_string_format(canonical)

    def parse_structure_from_bytes(self, data: bytes):
        """ Validate and decode an SID from data whose length is the declared length of the SID.
        Data beyond what the sub-authority count needs is allowed, and left alone.
        """
        length = len(data)
        if length == 0:
            raise MalformedSidException('No data was provided for the SID')
        if data[0] != SID_REVISION:
            raise MalformedSidException('Invalid SID revision {}'.format(data[0]))
        if length < 2:
            raise MalformedSidException('SID data is too short to hold a sub-authority count')
        sub_authority_count = data[1]
        if sub_authority_count > SID_MAX_SUB_AUTHORITIES:
            raise MalformedSidException('Invalid number of sub-authorities {}, the maximum is {}'
                                        .format(sub_authority_count, SID_MAX_SUB_AUTHORITIES))
        needed_length = SID_HEADER_LEN + SID_SUB_AUTHORITY_LEN * sub_authority_count
        if needed_length > length:
            raise MalformedSidException('Invalid SID length {}, {} sub-authorities need {} bytes'
                                        .format(length, sub_authority_count, needed_length))

        cursor = ByteCursor(data)
        Structure.parse_structure_from_cursor(self, cursor)
        self[SUB_AUTHORITY] = [cursor.unpack('<L', SUB_AUTHORITY) for _ in range(sub_authority_count)]
        return self

    def from_canonical_string_format(self, canonical: str):
        """ Populate this SID from a string like S-1-5-21-1004336348-1177238915-682003330-512 """
        items = canonical.strip().split('-') if canonical else []
        if len(items) < 3 or items[0].upper() != 'S':
            raise InvalidSidStringException('{} is not an SID in S-R-I-S... format'.format(canonical))
        try:
            revision = int(items[1])
            # authorities too big for 32 bits get written in hex
            authority = int(items[2], 16) if items[2].lower().startswith('0x') else int(items[2])
            sub_authorities = [int(item) for item in items[3:]]
        except ValueError:
            raise InvalidSidStringException('{} contains a component that is not a number'.format(canonical))

        if revision != SID_REVISION:
            raise InvalidSidStringException('{} has revision {}, but only revision {} exists'
                                            .format(canonical, revision, SID_REVISION))
        if not 0 <= authority <= MAX_IDENTIFIER_AUTHORITY_VALUE:
            raise InvalidSidStringException('{} has an identifier authority that does not fit in 6 bytes'
                                            .format(canonical))
        if len(sub_authorities) > SID_MAX_SUB_AUTHORITIES:
            raise InvalidSidStringException('{} has more than {} sub-authorities'
                                            .format(canonical, SID_MAX_SUB_AUTHORITIES))
        for sub_authority in sub_authorities:
            if not 0 <= sub_authority <= MAX_SUB_AUTHORITY_VALUE:
                raise InvalidSidStringException('{} has a sub-authority that does not fit in 4 bytes'
                                                .format(canonical))

        self[REVISION] = revision
        self[SUB_AUTHORITY_COUNT] = len(sub_authorities)
        self[IDENTIFIER_AUTHORITY] = authority.to_bytes(SID_IDENTIFIER_AUTHORITY_LEN, 'big')
        self[SUB_AUTHORITY] = sub_authorities
        return self

    def is_empty(self) -> bool:
        return len(self.get(IDENTIFIER_AUTHORITY, b'')) < SID_IDENTIFIER_AUTHORITY_LEN

    def get_identifier_authority(self) -> int:
        return int.from_bytes(self.get(IDENTIFIER_AUTHORITY, b''), 'big')

    def get_sub_authorities(self) -> List[int]:
        return list(self.get(SUB_AUTHORITY, []))

    def get_relative_identifier(self):
        """ The last sub-authority, which identifies a principal within its domain. """
        sub_authorities = self.get(SUB_AUTHORITY)
        if not sub_authorities:
            return None
        return sub_authorities[-1]

    def get_wire_length(self) -> int:
        if self.is_empty():
            return 0
        return SID_HEADER_LEN + SID_SUB_AUTHORITY_LEN * len(self[SUB_AUTHORITY])

    def get_data(self) -> bytes:
        """ Encode the SID in its binary form. The empty SID encodes as no bytes at all. """
        if self.is_empty():
            return b''
        data = pack('<BB', self[REVISION], len(self[SUB_AUTHORITY])) + self[IDENTIFIER_AUTHORITY]
        for sub_authority in self[SUB_AUTHORITY]:
            data += pack('<L', sub_authority)
        return data

    def to_canonical_string_format(self) -> str:
        # an SID that we never managed to decode has no authority, and renders as nothing
        if self.is_empty():
            return ''
        ans = 'S-%d-%d' % (self[REVISION], self.get_identifier_authority())
        for sub_authority in self[SUB_AUTHORITY]:
            ans += '-%d' % sub_authority
        return ans

    def to_ldap_filter_string_format(self) -> str:
        """ The binary SID escaped for use in an LDAP search filter, e.g. (objectSid=\\01\\05...) """
        return escape_bytes(self.get_data())

    def resolve(self) -> str:
        return resolve_sid_to_name(self)

    def __eq__(self, other):
        if not isinstance(other, ObjectSid):
            return False
        return self.get_data() == other.get_data()

    def __hash__(self):
        return self.get_data().__hash__()

    def __str__(self):
        return self.to_canonical_string_format()


class ObjectTypeGuid(Structure):
    """
    GUID as described in 2.3.4.2
    https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/001eec5a-7f8b-4293-9e21-ca349392db40

    The first three fields are little-endian, the last 8 bytes are kept as they are. This is the
    same layout python's uuid library calls bytes_le.
    """
    structure = (
        ('Data1', '<L'),
        ('Data2', '<H'),
        ('Data3', '<H'),
        ('Data4', '8s'),
    )
    REPR_NAME = 'ObjectTypeGuid'

    @classmethod
    def from_cursor(cls, cursor: ByteCursor, field_name: str = 'Guid') -> 'ObjectTypeGuid':
        return cls(data=cursor.read(GUID_LEN, field_name))

    @classmethod
    def from_canonical_string(cls, guid_str: str) -> 'ObjectTypeGuid':
        """ Build a guid from a string like 00299570-246d-11d0-a768-00aa006e0529, with or without braces """
        if not isinstance(guid_str, str):
            raise InvalidGuidStringException('{!r} is not a GUID string'.format(guid_str))
        try:
            guid = uuid.UUID(guid_str)
        except ValueError:
            raise InvalidGuidStringException('{} is not a GUID in 8-4-4-4-12 hex format'.format(guid_str))
        return cls(data=guid.bytes_le)

    def get_data(self) -> bytes:
        return pack('<LHH', self['Data1'], self['Data2'], self['Data3']) + self['Data4']

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(bytes_le=self.get_data())

    def to_canonical_string_format(self) -> str:
        """ Lowercase hex grouped 8-4-4-4-12, as it is written in SDDL """
        return str(self.to_uuid())

    def get_display_name(self) -> str:
        """ The name of the extended right/property set this guid refers to, if we know it.
        Otherwise the guid itself.
        """
        guid_str = self.to_canonical_string_format()
        name = get_display_name_for_object_type_guid(guid_str)
        return name if name else guid_str

    def __eq__(self, other):
        if not isinstance(other, ObjectTypeGuid):
            return False
        return self.get_data() == other.get_data()

    def __hash__(self):
        return self.get_data().__hash__()

    def __str__(self):
        return self.to_canonical_string_format()


def resolve_sid_to_name(sid: Union[str, ObjectSid]) -> str:
    """ Given an SID, return a human readable name for it if it is well known. Exact matches are
    tried first, then the relative identifier patterns that apply in any domain.
    If the SID isn't well known, its canonical string is returned unchanged.
    """
    sid_str = sid.to_canonical_string_format() if isinstance(sid, ObjectSid) else sid
    if not sid_str:
        return sid_str

    resolved = WELL_KNOWN_SID_NAMES.get(sid_str)
    if resolved:
        return resolved

    for pattern, name in WELL_KNOWN_SID_NAME_PATTERNS:
        if pattern.fullmatch(sid_str):
            logger.debug('Resolved %s to %s using pattern %s', sid_str, name, pattern.pattern)
            return name
    return sid_str
