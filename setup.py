#!/usr/bin/env python3
"""
Setup script for screensaver-any
"""

from setuptools import setup, find_packages
import os
import re


# Read the version without importing the package (it needs psutil)
def read_version():
    path = os.path.join(os.path.dirname(__file__), 'screensaver_any', '__version__.py')
    with open(path, encoding='utf-8') as f:
        return re.search(r"__version__ = '([^']+)'", f.read()).group(1)


# Read README for long_description
def read_file(filename):
    with open(os.path.join(os.path.dirname(__file__), filename), encoding='utf-8') as f:
        return f.read()


setup(
    name='screensaver-any',
    version=read_version(),
    description='Common interface to screensaver/screenlocker functions (KDE, GNOME, Cinnamon, xscreensaver)',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[
        'psutil',        # Process table lookup for screensaver detection
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov',
            'pytest-timeout',
        ],
    },
    entry_points={
        'console_scripts': [
            'screensaver-any=screensaver_any.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Utilities',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Operating System :: POSIX :: Linux',
        'Environment :: X11 Applications',
        'Topic :: Desktop Environment :: Screen Savers',
    ],
)
