#!/usr/bin/env python3

from setuptools import setup

version = '1.0.0'
author = 'Azaria Zornberg'
email = 'a.zornberg96@gmail.com'
license_str = 'MIT License'
url = 'https://github.com/zorn96/ms_security_descriptor/'
description = 'Python library for decoding Windows security descriptors and rendering them as SDDL'
package_name = 'ms_security_descriptor'
package_folder = '.'

long_description = open('README.md', encoding='utf-8').read()
packages = ['ms_security_descriptor',
            'ms_security_descriptor.environment',
            'ms_security_descriptor.environment.security'
            ]


setup_kwargs = {
    'packages': packages,
    'package_dir': {'': package_folder},
}

requirements = ['ldap3>=2.8.0',
                ]

test_requirements = ['pytest>=6.0',
                     ]

setup(name=package_name,
      version=version,
      install_requires=requirements,
      extras_require={'test': test_requirements},
      license=license_str,
      author=author,
      author_email=email,
      description=description,
      long_description=long_description,
      long_description_content_type='text/markdown',
      keywords='python3 ldap microsoft windows active-directory security-descriptor sddl acl ace sid',
      python_requires=">=3.6",
      url=url,
      classifiers=['Development Status :: 4 - Beta',
                   'Intended Audience :: Developers',
                   'Intended Audience :: Information Technology',
                   'Intended Audience :: System Administrators',
                   'License :: OSI Approved :: MIT License',
                   'Operating System :: MacOS :: MacOS X',
                   'Operating System :: Microsoft :: Windows',
                   'Operating System :: POSIX :: Linux',
                   'Programming Language :: Python',
                   'Programming Language :: Python :: 3',
                   'Programming Language :: Python :: 3.6',
                   'Programming Language :: Python :: 3.7',
                   'Programming Language :: Python :: 3.8',
                   'Programming Language :: Python :: 3.9',
                   'Topic :: Security',
                   'Topic :: Software Development :: Libraries :: Python Modules',
                   'Topic :: System :: Systems Administration :: Authentication/Directory :: LDAP'],
      **setup_kwargs
      )
