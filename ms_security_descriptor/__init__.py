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

from ms_security_descriptor.environment.security.ad_security_guids import (
    ADPropertySetGuid,
    ADRightsGuid,
    ADValidatedWriteGuid,
)
from ms_security_descriptor.environment.security.security_config_constants import (
    AceType,
    WellKnownSID,
)
from ms_security_descriptor.environment.security.security_descriptor_utils import (
    ACE,
    ACL,
    AccessMask,
    DefaultedFlags,
    SecurityDescriptorHeader,
    SelfRelativeSecurityDescriptor,
    parse_security_descriptor,
)
from ms_security_descriptor.environment.security.security_identifiers import (
    ObjectSid,
    ObjectTypeGuid,
    resolve_sid_to_name,
)

from ms_security_descriptor.exceptions import (
    InvalidGuidStringException,
    InvalidSidStringException,
    MalformedAceException,
    MalformedSidException,
    MsSecurityDescriptorException,
    SecurityDescriptorDecodeException,
    TruncatedBufferException,
)

from ms_security_descriptor.logging_utils import (
    configure_log_level,
    disable_logging,
    enable_logging,
)
