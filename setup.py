#!/usr/bin/env python
""" Slim declarative validation for events """

from setuptools import setup, find_packages

setup(
    # http://pythonhosted.org/setuptools/setuptools.html
    name='vouch',
    version='0.1.0',

    license='BSD',
    description=__doc__,
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    keywords=['validation', 'events', 'schema'],

    packages=find_packages(exclude=['tests', 'tests.*']),
    scripts=[],
    entry_points={
        'console_scripts': [
            'vouch-server = vouch.server.__main__:main',
        ],
    },

    python_requires='>=3.10',
    install_requires=[
        'fastapi >= 0.100',
        'pydantic-settings >= 2.0',
        'python-multipart >= 0.0.9',
        'structlog >= 23.1',
        'uvicorn >= 0.22',
    ],
    extras_require={
        'test': [
            'pytest >= 7.0',
            'httpx >= 0.24',
        ],
    },
    include_package_data=True,

    platforms='any',
    classifiers=[
        # https://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
