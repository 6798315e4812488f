#!/usr/bin/env python

from setuptools import setup, find_packages

classifiers = [
    'Development Status :: 3 - Alpha',
    'Intended Audience :: Developers',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'License :: OSI Approved :: BSD License',
]

# http://bit.ly/2alyerp
with open('wsframe/_version.py') as f:
    exec(f.read())

with open('README.md') as f:
    long_desc = f.read()

setup(
    name='wsframe',
    version=__version__,
    description="Websocket Frame Decoder",
    long_description=long_desc,
    long_description_content_type='text/markdown',
    author='WildFoundry',
    author_email='willmcgugan@gmail.com',
    url='https://www.dataplicity.com',
    platforms=['any'],
    packages=find_packages(exclude=['tests']),
    classifiers=classifiers,
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
    install_requires=[

    ],
    zip_safe=True
)
