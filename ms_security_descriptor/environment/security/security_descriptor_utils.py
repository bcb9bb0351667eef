""" Utilities for decoding Windows security descriptors.

A security descriptor details what different users and groups can and cannot do on an object.
Rather than users/groups/etc. having a rule on them that says "this entity can do these
things", the security descriptor in a windows model says "this is what other entities can
do to this one."

These utilities decode a self-relative security descriptor, along with the ACLs and ACEs within
it, from bytes into objects that can be inspected or rendered as SDDL.
"""
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

from collections import namedtuple
from typing import List, Optional

from ms_security_descriptor import logging_utils
from ms_security_descriptor.environment.security import sddl_utils
from ms_security_descriptor.environment.security.security_config_constants import (
    ACCESS_MASK_NAMES,
    ACE_COUNT,
    ACE_FLAGS,
    ACE_INHERITED_OBJECT_TYPE_PRESENT,
    ACE_OBJECT_TYPE_PRESENT,
    ACE_SIZE,
    ACE_TYPE,
    ACL_HEADER_LEN,
    ACL_REVISION,
    ACL_SIZE,
    APPLICATION_DATA,
    BASIC_ACE_FIXED_LEN,
    BASIC_ACE_TYPES,
    CALLBACK_ACE_TYPES,
    CONTROL,
    DACL,
    FLAGS,
    GROUP_SID,
    GUID_LEN,
    INHERITED_OBJECT_TYPE,
    MASK,
    OBJECT_ACE_FIXED_LEN,
    OBJECT_ACE_TYPES,
    OBJECT_TYPE,
    OFFSET_DACL,
    OFFSET_GROUP,
    OFFSET_OWNER,
    OFFSET_SACL,
    OWNER_SID,
    REVISION,
    SACL,
    SBZ1,
    SBZ2,
    SE_DACL_DEFAULTED,
    SE_GROUP_DEFAULTED,
    SE_OWNER_DEFAULTED,
    SE_SACL_DEFAULTED,
    SID,
    SID_HEADER_LEN,
    SID_SUB_AUTHORITY_LEN,
    AceType,
)
from ms_security_descriptor.environment.security.security_identifiers import ObjectSid, ObjectTypeGuid
from ms_security_descriptor.environment.security.structure_utils import ByteCursor, Structure, hexlify_bytes
from ms_security_descriptor.exceptions import (
    MalformedAceException,
    MalformedSidException,
    SecurityDescriptorDecodeException,
)


logger = logging_utils.get_logger()

# the control bits a caller needs in order to rebuild the descriptor through an OS api
DefaultedFlags = namedtuple('DefaultedFlags', ['owner_defaulted', 'group_defaulted',
                                               'dacl_defaulted', 'sacl_defaulted'])

_COMPONENT_LABELS = {OWNER_SID: 'Owner SID', GROUP_SID: 'Group SID', SACL: 'SACL', DACL: 'DACL'}


def parse_security_descriptor(data: bytes, check_acl_sizes: bool = True) -> 'SelfRelativeSecurityDescriptor':
    """ Decode a self-relative security descriptor from bytes.
    :param data: The raw bytes of the security descriptor. They are copied, so the caller may reuse
                 the buffer afterwards.
    :param check_acl_sizes: If true, warn when an ACL's declared size doesn't match the sizes of
                            the ACEs within it.
    :returns: A fully populated SelfRelativeSecurityDescriptor. Problems that were tolerated along
              the way (e.g. a malformed SID inside one ACE) are available via get_diagnostics().
    :raises: SecurityDescriptorDecodeException (or a subclass of it) naming the piece of the
             descriptor that could not be decoded.
    """
    security_descriptor = SelfRelativeSecurityDescriptor(check_acl_sizes=check_acl_sizes)
    security_descriptor.parse_structure_from_bytes(data)
    return security_descriptor


def _add_context(exception: SecurityDescriptorDecodeException, context: str) -> SecurityDescriptorDecodeException:
    """ A new exception of the same type with the failing sub-structure named in the message """
    return type(exception)('{}: {}'.format(context, exception.message))


def _parse_sid_region(region: bytes, ace_type: AceType, diagnostics: List[str]):
    """ Decode the SID at the end of an ACE, given every byte the ACE has left.
    Callback ACEs keep anything after the SID as application data; other ACEs should have
    nothing left over.
    Returns the SID, or the empty SID if it was malformed, and the application data.
    """
    try:
        sid = ObjectSid(data=region)
    except MalformedSidException as ex:
        logger.warning('Tolerating malformed SID in %s ACE: %s', ace_type.name, ex.message)
        diagnostics.append('Malformed SID: {}'.format(ex.message))
        return ObjectSid(), b''

    trailing_data = region[sid.get_wire_length():]
    if ace_type in CALLBACK_ACE_TYPES:
        return sid, trailing_data
    if trailing_data:
        logger.warning('%s ACE has %s bytes after its SID that are not accounted for', ace_type.name,
                       len(trailing_data))
        diagnostics.append('ACE size exceeds its contents by {} bytes'.format(len(trailing_data)))
    return sid, b''


class AccessMask(Structure):
    """
    ACCESS_MASK as described in 2.4.3
    https://msdn.microsoft.com/en-us/library/cc230294.aspx
    """
    structure = (
        (MASK, '<L'),
    )
    REPR_NAME = 'AccessMask'

    @classmethod
    def from_cursor(cls, cursor: ByteCursor) -> 'AccessMask':
        return cls().parse_structure_from_cursor(cursor)

    def has_privilege(self, priv: int) -> bool:
        return self[MASK] & priv == priv

    def get_permission_names(self) -> List[str]:
        """ Names of the rights set in the mask, lowest bit first. Bits we have no name for are skipped. """
        return [name for bit, name in ACCESS_MASK_NAMES if self[MASK] & bit]

    def to_sddl(self) -> str:
        return sddl_utils.access_mask_to_sddl(self[MASK])

    def __int__(self):
        return self[MASK]

    def __str__(self):
        return ' '.join(self.get_permission_names())


class BasicAceBody(Structure):
    """
    The body shared by ACCESS_ALLOWED_ACE, ACCESS_DENIED_ACE, SYSTEM_AUDIT_ACE, SYSTEM_ALARM_ACE
    and their callback variants, as described in 2.4.4.2, 2.4.4.4, 2.4.4.6, 2.4.4.7 and 2.4.4.10.
    After the mask (which the ACE reads) there's just an SID, and for callback ACEs, application data.
    """
    REPR_NAME = 'BasicAceBody'

    def parse_body_from_cursor(self, cursor: ByteCursor, ace_type: AceType, ace_size: int, diagnostics: List[str]):
        region = cursor.read(ace_size - BASIC_ACE_FIXED_LEN, SID)
        self[SID], self[APPLICATION_DATA] = _parse_sid_region(region, ace_type, diagnostics)
        return self


class ObjectAceBody(Structure):
    """
    The body shared by ACCESS_ALLOWED_OBJECT_ACE, ACCESS_DENIED_OBJECT_ACE, SYSTEM_AUDIT_OBJECT_ACE
    and their callback variants, as described in 2.4.4.3, 2.4.4.5, 2.4.4.8 and 2.4.4.11.
    https://msdn.microsoft.com/en-us/library/cc230289.aspx

    The flags say which of the two guids follow them. Whatever is left of the ACE after the
    guids is the SID.
    """
    structure = (
        (FLAGS, '<L'),
    )
    REPR_NAME = 'ObjectAceBody'

    @staticmethod
    def check_object_type(flags: int) -> int:
        if flags & ACE_OBJECT_TYPE_PRESENT:
            return GUID_LEN
        return 0

    @staticmethod
    def check_inherited_object_type(flags: int) -> int:
        if flags & ACE_INHERITED_OBJECT_TYPE_PRESENT:
            return GUID_LEN
        return 0

    def parse_body_from_cursor(self, cursor: ByteCursor, ace_type: AceType, ace_size: int, diagnostics: List[str]):
        Structure.parse_structure_from_cursor(self, cursor)
        flags = self[FLAGS]
        consumed = OBJECT_ACE_FIXED_LEN + self.check_object_type(flags) + self.check_inherited_object_type(flags)
        if ace_size < consumed:
            raise MalformedAceException('{} ACE declares size {} but its flags require at least {} bytes'
                                        .format(ace_type.name, ace_size, consumed))

        self[OBJECT_TYPE] = None
        if self.check_object_type(flags):
            self[OBJECT_TYPE] = ObjectTypeGuid.from_cursor(cursor, OBJECT_TYPE)
        self[INHERITED_OBJECT_TYPE] = None
        if self.check_inherited_object_type(flags):
            self[INHERITED_OBJECT_TYPE] = ObjectTypeGuid.from_cursor(cursor, INHERITED_OBJECT_TYPE)

        region = cursor.read(ace_size - consumed, SID)
        self[SID], self[APPLICATION_DATA] = _parse_sid_region(region, ace_type, diagnostics)
        return self

    def has_flag(self, flag: int) -> bool:
        return self[FLAGS] & flag == flag


class ACE(Structure):
    """
    ACE as described in 2.4.4
    https://msdn.microsoft.com/en-us/library/cc230295.aspx

    The header type selects one of two body shapes: a BasicAceBody or an ObjectAceBody. Types
    with no body we know how to read (unknown types, and the undocumented compound type) keep
    no body and an empty principal.
    The header's size is authoritative, and parsing always consumes exactly that many bytes.
    """
    structure = (
        #
        # ACE_HEADER as described in 2.4.4.1
        # https://msdn.microsoft.com/en-us/library/cc230296.aspx
        #
        (ACE_TYPE, 'B'),
        (ACE_FLAGS, 'B'),
        (ACE_SIZE, '<H'),
    )
    REPR_NAME = 'ACE'

    def __init__(self, data: bytes = None):
        self.ace_type = None
        self.body = None
        self.diagnostics = []
        super().__init__(data)

    @classmethod
    def from_cursor(cls, cursor: ByteCursor) -> 'ACE':
        return cls().parse_structure_from_cursor(cursor)

    def parse_structure_from_cursor(self, cursor: ByteCursor):
        # This will parse the header
        Structure.parse_structure_from_cursor(self, cursor)
        ace_size = self[ACE_SIZE]
        if ace_size < BASIC_ACE_FIXED_LEN:
            raise MalformedAceException('ACE declares size {}, which cannot hold its header and access mask'
                                        .format(ace_size))
        self[MASK] = AccessMask.from_cursor(cursor)

        # Now we parse the ACE body according to its type
        self.ace_type = AceType.get_ace_type_for_value(self[ACE_TYPE])
        if self.ace_type in BASIC_ACE_TYPES:
            self.body = BasicAceBody().parse_body_from_cursor(cursor, self.ace_type, ace_size, self.diagnostics)
        elif self.ace_type in OBJECT_ACE_TYPES:
            if ace_size < OBJECT_ACE_FIXED_LEN:
                raise MalformedAceException('{} ACE declares size {}, which cannot hold its object flags'
                                            .format(self.ace_type.name, ace_size))
            self.body = ObjectAceBody().parse_body_from_cursor(cursor, self.ace_type, ace_size, self.diagnostics)
        else:
            if self.ace_type is None:
                logger.warning('Keeping ACE of unrecognized type %s without decoding its body', self[ACE_TYPE])
                self.diagnostics.append('Unrecognized ACE type {}'.format(self[ACE_TYPE]))
            cursor.skip(ace_size - BASIC_ACE_FIXED_LEN, 'ACE body')

        logger.debug('Parsed %s ACE of size %s for %s', self.get_type_string(), ace_size, self.get_principal())
        return self

    def get_type_value(self) -> int:
        return self[ACE_TYPE]

    def get_flags_value(self) -> int:
        return self[ACE_FLAGS]

    def get_type_string(self) -> str:
        if self.ace_type is None:
            return 'UNKNOWN_{}'.format(self[ACE_TYPE])
        return self.ace_type.name

    def is_object_ace(self) -> bool:
        return isinstance(self.body, ObjectAceBody)

    def get_principal(self) -> ObjectSid:
        """ The SID this ACE applies to, regardless of which body shape it has. """
        if self.body is None:
            return ObjectSid()
        return self.body[SID]

    def get_mask(self) -> AccessMask:
        return self[MASK]

    def get_object_type(self) -> Optional[ObjectTypeGuid]:
        if not self.is_object_ace():
            return None
        return self.body[OBJECT_TYPE]

    def get_inherited_object_type(self) -> Optional[ObjectTypeGuid]:
        if not self.is_object_ace():
            return None
        return self.body[INHERITED_OBJECT_TYPE]

    def get_application_data(self) -> bytes:
        if self.body is None:
            return b''
        return self.body[APPLICATION_DATA]

    def has_flag(self, flag: int) -> bool:
        return self[ACE_FLAGS] & flag == flag

    def to_sddl(self) -> str:
        return sddl_utils.ace_to_sddl(self)

    def __str__(self):
        lines = [
            'SID: {}'.format(self.get_principal()),
            'AceType: {}'.format(self.get_type_string()),
            'Permissions: {}'.format(self[MASK]),
        ]
        if self.is_object_ace():
            object_type = self.get_object_type()
            inherited_object_type = self.get_inherited_object_type()
            lines.append('ObjectType: {}'.format(object_type.get_display_name() if object_type else ''))
            lines.append('InheritedObjectType: {}'.format(inherited_object_type.get_display_name()
                                                          if inherited_object_type else ''))
        if self.get_application_data():
            lines.append('ApplicationData: {}'.format(hexlify_bytes(self.get_application_data())))
        lines.append('Flags: {}'.format(self[ACE_FLAGS]))
        return '\n'.join(lines) + '\n'


class ACL(Structure):
    """
    ACL as described in 2.4.5
    https://msdn.microsoft.com/en-us/library/cc230297.aspx

    The ACE count is authoritative for how many ACEs we read. ACE order is kept exactly as it
    was encoded, since order matters when windows evaluates access.
    """
    structure = (
        (ACL_REVISION, 'B'),
        (SBZ1, 'B'),
        (ACL_SIZE, '<H'),
        (ACE_COUNT, '<H'),
        (SBZ2, '<H'),
    )
    REPR_NAME = 'ACL'

    def __init__(self, data: bytes = None, check_size: bool = True, acl_name: str = 'ACL'):
        self.aces = []
        self.diagnostics = []
        self.check_size = check_size
        self.acl_name = acl_name
        super().__init__(data)

    @classmethod
    def from_cursor(cls, cursor: ByteCursor, check_size: bool = True, acl_name: str = 'ACL') -> 'ACL':
        return cls(check_size=check_size, acl_name=acl_name).parse_structure_from_cursor(cursor)

    def parse_structure_from_cursor(self, cursor: ByteCursor):
        self.aces = []
        Structure.parse_structure_from_cursor(self, cursor)
        for i in range(self[ACE_COUNT]):
            try:
                ace = ACE.from_cursor(cursor)
            except SecurityDescriptorDecodeException as ex:
                raise _add_context(ex, 'ACE {} of {} ACEs'.format(i, self[ACE_COUNT])) from ex
            self.aces.append(ace)

        if self.check_size:
            expected_size = ACL_HEADER_LEN + sum(ace[ACE_SIZE] for ace in self.aces)
            if expected_size != self[ACL_SIZE]:
                logger.warning('%s declares size %s but its header and ACEs take %s bytes', self.acl_name,
                               self[ACL_SIZE], expected_size)
                self.diagnostics.append('{} declares size {} but its header and ACEs take {} bytes'
                                        .format(self.acl_name, self[ACL_SIZE], expected_size))
        logger.debug('Parsed %s with %s ACEs', self.acl_name, len(self.aces))
        return self

    def get_diagnostics(self) -> List[str]:
        diagnostics = list(self.diagnostics)
        for i, ace in enumerate(self.aces):
            diagnostics.extend('{} ACE {}: {}'.format(self.acl_name, i, msg) for msg in ace.diagnostics)
        return diagnostics

    def to_sddl(self, control_sddl: str = '', prefix: str = None) -> str:
        if prefix is None:
            return sddl_utils.acl_to_sddl(self, control_sddl)
        return sddl_utils.acl_to_sddl(self, control_sddl, prefix=prefix)

    def __iter__(self):
        return iter(self.aces)

    def __len__(self):
        return len(self.aces)


class SecurityDescriptorHeader(Structure):
    """ The fixed 20 byte portion of a self-relative security descriptor. The offsets are relative
    to the start of the descriptor, and 0 means the piece is absent.
    """
    structure = (
        (REVISION, 'B'),
        (SBZ1, 'B'),
        (CONTROL, '<H'),
        (OFFSET_OWNER, '<L'),
        (OFFSET_GROUP, '<L'),
        (OFFSET_SACL, '<L'),
        (OFFSET_DACL, '<L'),
    )
    REPR_NAME = 'SecurityDescriptorHeader'

    def get_control_value(self) -> int:
        return self[CONTROL]

    def has_control_flag(self, flag: int) -> bool:
        return self[CONTROL] & flag == flag

    def get_defaulted_flags(self) -> DefaultedFlags:
        """ Which pieces of the descriptor were filled in by a default mechanism rather than given
        explicitly. Needed when rebuilding the descriptor through a windows api.
        https://docs.microsoft.com/en-us/windows/win32/api/securitybaseapi/nf-securitybaseapi-setsecuritydescriptordacl
        """
        return DefaultedFlags(owner_defaulted=self.has_control_flag(SE_OWNER_DEFAULTED),
                              group_defaulted=self.has_control_flag(SE_GROUP_DEFAULTED),
                              dacl_defaulted=self.has_control_flag(SE_DACL_DEFAULTED),
                              sacl_defaulted=self.has_control_flag(SE_SACL_DEFAULTED))

    def to_sddl(self) -> str:
        """ The DACL control abbreviations, which get written right after D: """
        return sddl_utils.dacl_control_to_sddl(self[CONTROL])

    def sacl_control_to_sddl(self) -> str:
        return sddl_utils.sacl_control_to_sddl(self[CONTROL])


class SelfRelativeSecurityDescriptor(object):
    """
    Self-relative security descriptor as described in 2.4.6
    https://msdn.microsoft.com/en-us/library/cc230366.aspx

    Decoding is a single forward pass. After the header, the owner, group, SACL and DACL are
    read in the order their offsets lay them out, and an offset of 0 means that piece is absent.
    The owner and group SIDs each take up OffsetGroup - OffsetOwner bytes, except that an SID
    at the very end of the data only needs the bytes its sub-authority count asks for.

    Some encodings have the owner and group offsets coincide at a non-zero position. For those,
    the principal of the first DACL ACE is used as both owner and group, and a diagnostic is
    recorded saying so.
    """
    REPR_NAME = 'SelfRelativeSecurityDescriptor'

    def __init__(self, data: bytes = None, check_acl_sizes: bool = True):
        self.check_acl_sizes = check_acl_sizes
        self.header = None
        self.fields = {OWNER_SID: ObjectSid(), GROUP_SID: ObjectSid(), SACL: None, DACL: None}
        self.diagnostics = []
        if data is not None:
            self.parse_structure_from_bytes(data)

    def parse_structure_from_bytes(self, data: bytes):
        return self.parse_structure_from_cursor(ByteCursor(data))

    def parse_structure_from_cursor(self, cursor: ByteCursor):
        try:
            header = SecurityDescriptorHeader().parse_structure_from_cursor(cursor)
        except SecurityDescriptorDecodeException as ex:
            raise _add_context(ex, 'Security descriptor header') from ex
        logger.debug('Parsed security descriptor header %s', header)

        diagnostics = []
        if header[REVISION] != 1:
            logger.warning('Security descriptor has unexpected revision %s', header[REVISION])
            diagnostics.append('Unexpected security descriptor revision {}'.format(header[REVISION]))

        owner_offset = header[OFFSET_OWNER]
        group_offset = header[OFFSET_GROUP]
        sids_coincide = owner_offset != 0 and owner_offset == group_offset
        sid_size = 0
        if owner_offset != 0 and group_offset != 0:
            sid_size = group_offset - owner_offset
            if sid_size < 0:
                raise SecurityDescriptorDecodeException('Group SID offset {} comes before owner SID offset {}'
                                                        .format(group_offset, owner_offset))

        components = [(header[OFFSET_SACL], SACL), (header[OFFSET_DACL], DACL)]
        if not sids_coincide:
            components.extend([(owner_offset, OWNER_SID), (group_offset, GROUP_SID)])
        components = sorted((offset, name) for offset, name in components if offset != 0)

        fields = {OWNER_SID: ObjectSid(), GROUP_SID: ObjectSid(), SACL: None, DACL: None}
        for i, (offset, name) in enumerate(components):
            label = _COMPONENT_LABELS[name]
            try:
                cursor.advance_to(offset, label)
                if name in (SACL, DACL):
                    fields[name] = ACL.from_cursor(cursor, check_size=self.check_acl_sizes, acl_name=label)
                    continue
                next_offset = components[i + 1][0] if i + 1 < len(components) else None
                fields[name] = self._parse_sid_component(cursor, label, sid_size, next_offset, diagnostics)
            except SecurityDescriptorDecodeException as ex:
                raise _add_context(ex, label) from ex

        if sids_coincide:
            fields[OWNER_SID], fields[GROUP_SID] = self._get_coinciding_owner_and_group(owner_offset,
                                                                                        fields[DACL], diagnostics)
        else:
            for offset, name in ((owner_offset, OWNER_SID), (group_offset, GROUP_SID)):
                if offset == 0:
                    logger.debug('%s is absent from the security descriptor', _COMPONENT_LABELS[name])
                    diagnostics.append('{} is absent'.format(_COMPONENT_LABELS[name]))

        # only publish what we decoded once everything has succeeded
        self.header = header
        self.fields = fields
        self.diagnostics = diagnostics
        return self

    @staticmethod
    def _parse_sid_component(cursor: ByteCursor, label: str, sid_size: int, next_offset: Optional[int],
                             diagnostics: List[str]) -> ObjectSid:
        """ Read the owner or group SID at the cursor.
        Both SIDs take up OffsetGroup - OffsetOwner bytes, but never run into the next piece of the
        descriptor. When that many bytes don't remain (e.g. a short group at the end), or only one
        of the two is present, the SID takes what its sub-authority count needs.
        """
        if sid_size and sid_size <= cursor.remaining():
            length = sid_size
            if next_offset is not None:
                length = min(length, next_offset - cursor.position)
        else:
            sub_authority_count = cursor.peek(2, SID)[1]
            length = SID_HEADER_LEN + SID_SUB_AUTHORITY_LEN * sub_authority_count
        try:
            return ObjectSid.from_cursor(cursor, length)
        except MalformedSidException as ex:
            logger.warning('Tolerating malformed %s: %s', label, ex.message)
            diagnostics.append('Malformed {}: {}'.format(label, ex.message))
            return ObjectSid()

    @staticmethod
    def _get_coinciding_owner_and_group(offset: int, dacl: Optional[ACL], diagnostics: List[str]):
        if dacl is None or not dacl.aces:
            logger.warning('Owner and group offsets coincide and there is no DACL ACE to take them from')
            diagnostics.append('Owner and group offsets coincide at {} and there is no DACL ACE to take '
                               'them from'.format(offset))
            return ObjectSid(), ObjectSid()
        principal = dacl.aces[0].get_principal()
        logger.warning('Owner and group offsets coincide at %s, using the first DACL ACE principal %s '
                       'as both', offset, principal)
        diagnostics.append('Owner and group offsets coincide at {}, so the first DACL ACE principal {} '
                           'was used as both'.format(offset, principal))
        return principal, principal

    def get_owner(self) -> ObjectSid:
        return self.fields[OWNER_SID]

    def get_group(self) -> ObjectSid:
        return self.fields[GROUP_SID]

    def get_owner_name(self) -> str:
        return self.get_owner().resolve()

    def get_group_name(self) -> str:
        return self.get_group().resolve()

    def get_dacl(self) -> Optional[ACL]:
        return self.fields[DACL]

    def get_sacl(self) -> Optional[ACL]:
        return self.fields[SACL]

    def get_control(self) -> int:
        if self.header is None:
            return 0
        return self.header.get_control_value()

    def get_defaulted_flags(self) -> DefaultedFlags:
        if self.header is None:
            return DefaultedFlags(owner_defaulted=False, group_defaulted=False, dacl_defaulted=False,
                                  sacl_defaulted=False)
        return self.header.get_defaulted_flags()

    def get_diagnostics(self) -> List[str]:
        """ Everything that was tolerated while decoding, from the descriptor itself and its ACLs """
        diagnostics = list(self.diagnostics)
        for acl in (self.get_dacl(), self.get_sacl()):
            if acl is not None:
                diagnostics.extend(acl.get_diagnostics())
        return diagnostics

    def to_sddl(self) -> str:
        return sddl_utils.security_descriptor_to_sddl(self)

    def __getitem__(self, key: str):
        return self.fields[key]

    def __repr__(self):
        return ('{}(header={!r}, owner={}, group={}, sacl={!r}, dacl={!r})'
                .format(self.REPR_NAME, self.header, self.get_owner(), self.get_group(), self.get_sacl(),
                        self.get_dacl()))

    def __str__(self):
        if self.header is None:
            return 'Empty Security Descriptor'
        return ('Parsed Security Descriptor:\n Offsets:\n Owner={} Group={} Sacl={} Dacl={}\n'
                .format(self.header[OFFSET_OWNER], self.header[OFFSET_GROUP], self.header[OFFSET_SACL],
                        self.header[OFFSET_DACL]))
