#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os
import re
from io import open

from setuptools import (
    find_packages,
    setup,
)

readme = open('README.rst', encoding='utf8').read()


def read_reqs(name):
    with open(os.path.join(os.path.dirname(__file__), name), encoding='utf8') as f:
        return [line for line in f.read().split('\n') if line and not line.strip().startswith('#')]


def read_version():
    with open(os.path.join('dynamic_form', '__init__.py'), encoding='utf8') as f:
        m = re.search(r'''__version__\s*=\s*['"]([^'"]*)['"]''', f.read())
        if m:
            return m.group(1)
        raise ValueError("couldn't find version")


setup(
    name='dynamic_form',
    version=read_version(),
    description='Render validation errors of forms and models as HTML',
    long_description=readme,
    packages=find_packages(include=['dynamic_form', 'dynamic_form.*']),
    include_package_data=True,
    install_requires=['Django >= 4.2'] + read_reqs('requirements.txt'),
    extras_require={
        'test': read_reqs('test_requirements.txt'),
    },
    license="BSD",
    zip_safe=False,
    keywords='dynamic_form',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Framework :: Django',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
)
