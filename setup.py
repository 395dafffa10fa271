"""
Build script for the stringhelpers package.
"""

# std
import os

# third-party
from setuptools import Command, find_packages, setup


# Setuptools
# ---------------------------------------------------------------------------- #

class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        os.system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info '
                  './.pytest_cache')


# Main
# ---------------------------------------------------------------------------- #

setup(
    name='stringhelpers',
    version='0.1.0',
    description='Stateless string helpers: diacritic folding, natural ordering, '
                'case conversion, padding and parsing.',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests', 'tests.*']),
    package_data={'stringhelpers': ['config.yaml']},
    install_requires=[
        'loguru',
        'platformdirs',
        'pyyaml',
        'pyuca',
    ],
    extras_require={
        'test': ['pytest']
    },
    cmdclass={'clean': CleanCommand}
)
