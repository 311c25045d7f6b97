#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes']
test_requires = ['tox', 'pytest', 'tabulate']

setup(
    name='haltxf',
    version='0.1.0',
    author='haltxf contributors',
    packages=['haltxf'],
    install_requires = requires,
    extras_require = {'test': test_requires},
    license='MIT',
    description='transducers with early termination, independent of collection and consumer.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)
