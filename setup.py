#!/usr/bin/env python3
import os
from setuptools import setup, find_packages

repo_base_dir = os.path.abspath(os.path.dirname(__file__))
# pull in the packages metadata
package_about = {}
with open(os.path.join(repo_base_dir, "errorlist", "__about__.py")) as about_file:
    exec(about_file.read(), package_about)
    long_description = package_about['__doc__']


TESTS_REQUIRE = ['pytest>=4.3.0', 'pytest-timeout', 'pytest-benchmark']


if __name__ == '__main__':
    setup(
        name=package_about['__title__'],
        version=package_about['__version__'],
        description=package_about['__summary__'],
        long_description=long_description.strip(),
        author=package_about['__author__'],
        packages=find_packages(include=['errorlist', 'errorlist.*']),
        install_requires=[],
        extras_require={
            'docs': ["sphinx", "sphinx_rtd_theme"],
            'test': TESTS_REQUIRE,
            'contrib': ['flake8', 'flake8-bugbear'] + TESTS_REQUIRE,
        },
        # metadata for package search
        license='MIT',
        # https://pypi.python.org/pypi?%3Aaction=list_classifiers
        classifiers=[
            'Development Status :: 4 - Beta',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: MIT License',
            'Topic :: Software Development :: Libraries',
            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: 3.8',
            'Programming Language :: Python :: 3.9',
            'Programming Language :: Python :: 3.10',
            'Programming Language :: Python :: 3.11',
            'Programming Language :: Python :: 3.12',
        ],
        keywords=package_about['__keywords__'],
        python_requires='>=3.8',
    )
