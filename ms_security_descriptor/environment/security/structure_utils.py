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

""" Building blocks for decoding the binary security structures.

Every structure is read through a ByteCursor, which only moves forward. Each structure reads
exactly the bytes it declares and then hands control back to its parent, so a whole security
descriptor is decoded in one pass with no backtracking.
"""
import binascii

from struct import calcsize, unpack

from ms_security_descriptor.exceptions import SecurityDescriptorDecodeException, TruncatedBufferException


class ByteCursor(object):
    """ A forward-only reader over an in memory bytestring.
    Any read that asks for more bytes than remain raises a TruncatedBufferException, since at
    that point we've lost track of where records begin and end.
    """

    def __init__(self, data: bytes, position: int = 0):
        # copy so that callers can reuse their buffer as soon as we return
        self.data = bytes(data)
        self.position = position

    def remaining(self) -> int:
        return len(self.data) - self.position

    def read(self, length: int, field_name: str = 'data') -> bytes:
        """ Read exactly `length` bytes and advance past them. """
        if length < 0:
            raise TruncatedBufferException('Cannot read a negative length ({}) for {} at offset {}'
                                           .format(length, field_name, self.position))
        if length > self.remaining():
            raise TruncatedBufferException('Needed {} bytes for {} at offset {} but only {} remain'
                                           .format(length, field_name, self.position, self.remaining()))
        chunk = self.data[self.position:self.position + length]
        self.position += length
        return chunk

    def skip(self, length: int, field_name: str = 'data'):
        self.read(length, field_name)

    def peek(self, length: int, field_name: str = 'data') -> bytes:
        """ Read exactly `length` bytes without advancing past them. """
        chunk = self.read(length, field_name)
        self.position -= length
        return chunk

    def advance_to(self, position: int, field_name: str = 'data'):
        """ Move forward to an absolute position, e.g. an offset from a header.
        The cursor never moves backwards, so a position behind it means two structures overlap.
        """
        if position < self.position:
            raise SecurityDescriptorDecodeException('{} at offset {} overlaps data that ends at offset {}'
                                                    .format(field_name, position, self.position))
        self.skip(position - self.position, field_name)

    def unpack(self, format_spec: str, field_name: str = 'data'):
        """ Read and unpack a single value according to a struct format specification. """
        chunk = self.read(calcsize(format_spec), field_name)
        return unpack(format_spec, chunk)[0]

    def __repr__(self):
        return 'ByteCursor(position={}, remaining={})'.format(self.position, self.remaining())


class Structure(object):
    """ A structure is defined by a tuple of (field name, struct format specification) pairs,
    which are unpacked in order from a cursor into a dictionary of fields.

    Structures with variable length or optional pieces (SIDs, ACEs, ACLs) unpack their fixed
    fields through this class and then read the rest themselves.

    Fields are accessed like a dictionary, e.g. `ace[ACE_TYPE]`.
    """
    structure = ()
    REPR_NAME = 'Structure'

    def __init__(self, data: bytes = None):
        self.fields = {}
        if data is not None:
            self.parse_structure_from_bytes(data)

    def parse_structure_from_bytes(self, data: bytes):
        """ Given data, unpack it based on the structure we have. """
        return self.parse_structure_from_cursor(ByteCursor(data))

    def parse_structure_from_cursor(self, cursor: ByteCursor):
        """ Unpack each of our fixed fields in order, advancing the cursor past them. """
        for field_name, format_spec in self.structure:
            self[field_name] = cursor.unpack(format_spec, field_name)
        return self

    @classmethod
    def get_fixed_length(cls) -> int:
        return sum(calcsize(format_spec) for _, format_spec in cls.structure)

    def keys(self):
        """ The actual fields of our structure are ordered, so this shouldn't be used for iteration
        in any kind of unpacking of our data. But supporting common dict-like operations makes it
        easier to programmatically check presence or absence of various keys and values.
        """
        return self.fields.keys()

    def values(self):
        return self.fields.values()

    def items(self):
        return self.fields.items()

    def get(self, key: str, default=None):
        return self.fields.get(key, default)

    def __contains__(self, key: str):
        return key in self.fields

    def __getitem__(self, key: str):
        return self.fields[key]

    def __setitem__(self, key: str, value):
        self.fields[key] = value

    def __repr__(self):
        field_reprs = ', '.join('{}={!r}'.format(name, value) for name, value in self.fields.items())
        return '{}({})'.format(self.REPR_NAME, field_reprs)


def hexlify_bytes(data: bytes) -> str:
    # our data cannot necessarily be encoded as a string, so convert it to hex
    return '0x' + binascii.hexlify(data).decode('UTF-8')
