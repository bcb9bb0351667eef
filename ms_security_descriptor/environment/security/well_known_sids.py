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

""" Display names for well known SIDs.

Unlike the SDDL abbreviations, these are only used to show people something friendlier than
an SID. Exact matches win, then the relative identifier patterns are tried in order. The
patterns must match the whole SID.
"""
import re

WELL_KNOWN_SID_NAMES = {
    'S-1-0': 'Null Authority',
    'S-1-0-0': 'Nobody',
    'S-1-1': 'World Authority',
    'S-1-1-0': 'Everyone',
    'S-1-15-2-1': 'All App Packages',
    'S-1-15-2-2': 'Any Restricted App Packages',
    'S-1-16-0': 'Untrusted Mandatory Level',
    'S-1-16-12288': 'High Integrity level',
    'S-1-16-16384': 'System Integrity level',
    'S-1-16-20480': 'Protected Process Mandatory Level',
    'S-1-16-28672': 'Secure Process Mandatory Level',
    'S-1-16-4096': 'Low integrity level',
    'S-1-16-8192': 'Medium integrity level',
    'S-1-16-8448': 'Medium-plus integrity level',
    'S-1-2': 'Local Authority',
    'S-1-2-0': 'Local (Users with the ability to log in locally)',
    'S-1-2-1': 'Console Logon (Users who are logged onto the physical console)',
    'S-1-3': 'Creator Authority',
    'S-1-3-0': 'Creator Owner',
    'S-1-3-1': 'Creator Group',
    'S-1-3-2': 'Creator Owner Server',
    'S-1-3-3': 'Creator Group Server',
    'S-1-3-4': 'Creator Owner Rights',
    'S-1-4': 'Non-unique Authority',
    'S-1-5': 'NT Authority',
    'S-1-5-1': 'Dialup',
    'S-1-5-10': 'Principal Self',
    'S-1-5-1000': 'Other Organization',
    'S-1-5-11': 'Authenticated Users',
    'S-1-5-12': 'Restricted Code',
    'S-1-5-13': 'Terminal Server Users',
    'S-1-5-14': 'Remote Interactive Logon',
    'S-1-5-15': 'This Organization',
    'S-1-5-17': 'This Organization (Used by the default IIS user)',
    'S-1-5-18': 'Local System',
    'S-1-5-19': 'Local Service',
    'S-1-5-2': 'Network Logon User',
    'S-1-5-20': 'Network Service',
    'S-1-5-21-0-0-0-498': 'Enterprise Read-Only Domain Controllers Group',
    'S-1-5-21-0-0-0-500': 'Local Administrator',
    'S-1-5-21-0-0-0-501': 'Local Guest',
    'S-1-5-21-0-0-0-512': 'Domain Admins',
    'S-1-5-21-0-0-0-513': 'Domain Users',
    'S-1-5-21-0-0-0-514': 'Domain Guests',
    'S-1-5-21-0-0-0-515': 'Domain Computers',
    'S-1-5-21-0-0-0-516': 'Domain Controllers',
    'S-1-5-21-0-0-0-517': 'Domain Certificate Publishers Admins',
    'S-1-5-21-0-0-0-518': 'Schema Administrators',
    'S-1-5-21-0-0-0-519': 'Enterprise Admins',
    'S-1-5-21-0-0-0-520': 'Group Policy Creator Owners Admins',
    'S-1-5-21-0-0-0-522': 'Clonable Domain Controllers',
    'S-1-5-21-0-0-0-553': 'RAS Remote Access Services Servers',
    'S-1-5-3': 'Batch',
    'S-1-5-32-544': 'BUILTIN\\Administrators',
    'S-1-5-32-545': 'BUILTIN\\Users',
    'S-1-5-32-546': 'BUILTIN\\Guests',
    'S-1-5-32-547': 'BUILTIN\\Power Users',
    'S-1-5-32-548': 'BUILTIN\\Account Operators',
    'S-1-5-32-549': 'BUILTIN\\Server Operators',
    'S-1-5-32-550': 'BUILTIN\\Print Operators',
    'S-1-5-32-551': 'BUILTIN\\Backup Operators',
    'S-1-5-32-552': 'BUILTIN\\Replicator',
    'S-1-5-32-554': 'BUILTIN\\Pre-Windows 2000 Compatible Access',
    'S-1-5-32-555': 'BUILTIN\\Remote Desktop Users',
    'S-1-5-32-556': 'BUILTIN\\Network Configuration Operators',
    'S-1-5-32-557': 'BUILTIN\\Incoming Forest Trust Builders',
    'S-1-5-32-558': 'BUILTIN\\Performance Monitor Users',
    'S-1-5-32-559': 'BUILTIN\\Performance Log Users',
    'S-1-5-32-560': 'BUILTIN\\Windows Authorization Access Group',
    'S-1-5-32-561': 'BUILTIN\\Terminal Server License Servers',
    'S-1-5-32-562': 'BUILTIN\\Distributed COM Users',
    'S-1-5-32-568': 'BUILTIN\\IIS IUSRS',
    'S-1-5-32-569': 'BUILTIN\\Cryptographic Operators',
    'S-1-5-32-573': 'BUILTIN\\Event Log Readers',
    'S-1-5-32-574': 'BUILTIN\\Certificate Service DCOM Access',
    'S-1-5-32-575': 'BUILTIN\\RDS Remote Access Servers',
    'S-1-5-32-576': 'BUILTIN\\RDS Endpoint Servers',
    'S-1-5-32-577': 'BUILTIN\\RDS Management Servers',
    'S-1-5-32-578': 'BUILTIN\\Hyper V Admins',
    'S-1-5-32-579': 'BUILTIN\\Access Control Assistance Operators',
    'S-1-5-32-580': 'BUILTIN\\Remote Management Users',
    'S-1-5-33': 'Write Restricted',
    'S-1-5-4': 'Interactively logged-on User',
    'S-1-5-6': 'Service Logon User',
    'S-1-5-64-10': 'NTLM Authentication',
    'S-1-5-64-14': 'SChannel Authentication',
    'S-1-5-64-21': 'Digest Authentication',
    'S-1-5-7': 'Anonymous',
    'S-1-5-8': 'Proxy',
    'S-1-5-80': 'NT Service',
    'S-1-5-80-956008885-3418522649-1831038044-1853292631-2271478464': 'TrustedInstaller',
    'S-1-5-84-0-0-0-0-0': 'User Mode Driver',
    'S-1-5-86-1544737700-199408000-2549878335-3519669259-381336952': 'WMI (Local Service)',
    'S-1-5-86-615999462-62705297-2911207457-59056572-3668589837': 'WMI (Network Service)',
    'S-1-5-9': 'Enterprise Domain Controllers',
}

# Relative identifiers that mean the same thing in every domain. Logon sessions come first
# because their second number could otherwise look like one of the domain RIDs.
WELL_KNOWN_SID_NAME_PATTERNS = [
    (re.compile(r'S-1-5-5-[0-9]+-[0-9]+'), 'Logon Session'),
    (re.compile(r'S-1-5-21-[0-9-]+-518'), 'Schema Admins'),
    (re.compile(r'S-1-5-21-[0-9-]+-519'), 'Enterprise Admins'),
    (re.compile(r'S-1-5-21-[0-9-]+-553'), 'RAS Servers'),
    (re.compile(r'S-1-5-[0-9-]+-500'), 'Administrator'),
    (re.compile(r'S-1-5-[0-9-]+-501'), 'Guest'),
    (re.compile(r'S-1-5-[0-9-]+-502'), 'KRBTGT'),
    (re.compile(r'S-1-5-[0-9-]+-512'), 'Domain Admins'),
    (re.compile(r'S-1-5-[0-9-]+-513'), 'Domain Users'),
    (re.compile(r'S-1-5-[0-9-]+-514'), 'Domain Guests'),
    (re.compile(r'S-1-5-[0-9-]+-515'), 'Domain Computers'),
    (re.compile(r'S-1-5-[0-9-]+-516'), 'Domain Controllers'),
    (re.compile(r'S-1-5-[0-9-]+-517'), 'Cert Publishers'),
    (re.compile(r'S-1-5-[0-9-]+-520'), 'Group Policy Creator Owners'),
    (re.compile(r'S-1-5-[0-9-]+-533'), 'RAS and IAS Servers'),
]
