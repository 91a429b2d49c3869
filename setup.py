#!/usr/bin/env python

# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

from setuptools import find_namespace_packages
from setuptools import setup

setup(
    name='vmaas-client',
    version='1.0.0',
    description='Client library and CLI for the VMware as a Service API',
    license='BSD-2-Clause',
    python_requires='>=3.8',
    packages=find_namespace_packages(include=['vmaas_client',
                                              'vmaas_client.*']),
    install_requires=[
        'click>=8.0',
        'dataclasses-json>=0.5.7',
        'PyYAML>=5.4',
        'requests>=2.28',
        'urllib3>=2.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'vmaas = vmaas_client.client.vmaas:main',
        ],
    },
)
