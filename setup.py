"""
Traffic
"""
import codecs
import os
import re

from setuptools import setup, find_packages


with codecs.open(os.path.join(os.path.abspath(os.path.dirname(
        __file__)), 'src', 'traffic', '__init__.py'), 'r', 'latin1') as fp:
    try:
        version = re.findall(r"^__version__ = '([^']+)'\r?$",
                             fp.read(), re.M)[0]
    except IndexError:
        raise RuntimeError('Unable to determine version.')


setup(
    name='traffic',
    version=version,
    license='MIT',
    description='URL route compiler and matcher with typed placeholders ' +
                'and reverse URI generation',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    keywords=['web', 'routing', 'url'],
    python_requires='>=3.7',
    install_requires=[
        'uvloop>=0.11.3',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
    entry_points="""
         [console_scripts]
         traffic = traffic.__main__:main
    """,
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'Environment :: Web Environment',
        'License :: OSI Approved :: MIT License',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Internet :: WWW/HTTP'
    ],
    zip_safe=False,
)
