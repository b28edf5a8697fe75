"""A setuptools based setup module.
See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

from setuptools import setup
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

with open(path.join(here, 'ckmech', '_version.py')) as version_file:
    exec(version_file.read())

# Get the long description from the relevant files
with open(path.join(here, 'README.md')) as readme_file:
    long_description = readme_file.read()

install_requires = [
    'numpy>=1.12.0',
    'pyyaml>=3.11',
]

tests_require = [
    'pytest>=3.0.1',
    'optionloop>1.0.3',
    'packaging',
]

setup(
    name='ckmech',
    version=__version__,
    description='Reader for Chemkin-format chemical kinetic mechanisms',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT License',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Chemistry',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    keywords='chemical_kinetics chemkin mechanism parser',

    packages=['ckmech', 'ckmech.core', 'ckmech.tests'],
    package_dir={'ckmech': 'ckmech'},
    install_requires=install_requires,
    package_data={
        'ckmech.tests': ['*.dat', '*.yaml'],
        },
    include_package_data=True,
    extras_require={
        'test': tests_require,
    },
    zip_safe=False,

    entry_points={
        'console_scripts': [
            'ckmech=ckmech.__main__:main',
        ],
    },
)
