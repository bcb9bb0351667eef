""" Exceptions used within the library """
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


class MsSecurityDescriptorException(Exception):
    """ A parent class for all other exceptions so that users can have a catch-all exception for
    functional issues that still doesn't blind them to things like accidentally providing a string
    where bytes are needed.
    """
    def __init__(self, exception_str):
        self.message = exception_str
        super().__init__(self.message)


class InvalidSidStringException(MsSecurityDescriptorException):
    """ An exception raised when a string cannot be interpreted as an SID in canonical S-R-I-S... format """
    def __init__(self, exception_str):
        super().__init__(exception_str)


class InvalidGuidStringException(MsSecurityDescriptorException):
    """ An exception raised when a string cannot be interpreted as a GUID in 8-4-4-4-12 hex format """
    def __init__(self, exception_str):
        super().__init__(exception_str)


class SecurityDescriptorDecodeException(MsSecurityDescriptorException):
    """ An exception raised when errors occur decoding a security descriptor """
    def __init__(self, exception_str):
        super().__init__(exception_str)


class MalformedAceException(SecurityDescriptorDecodeException):
    """ An exception raised when an ACE header declares a size that cannot hold the fixed portion
    of the ACE body, meaning the ACE cannot be consumed exactly as declared.
    """
    def __init__(self, exception_str):
        super().__init__(exception_str)


class MalformedSidException(SecurityDescriptorDecodeException):
    """ An exception raised when an SID has an invalid revision, too many sub-authorities, or a
    declared length that cannot hold its sub-authorities.
    ACE and descriptor decoding tolerate this and keep an empty SID in its place.
    """
    def __init__(self, exception_str):
        super().__init__(exception_str)


class TruncatedBufferException(SecurityDescriptorDecodeException):
    """ An exception raised when a field is declared to be longer than the data that remains.
    Once this happens we can no longer tell where records begin and end, so it is always fatal.
    """
    def __init__(self, exception_str):
        super().__init__(exception_str)
