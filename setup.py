#!/usr/bin/env python
from setuptools import setup, find_packages

with open('README.rst', 'r') as f:
    long_description = f.read()

setup_params = dict(
    name="ufokit",
    version="0.1",
    description="Read, validate and write UFO font sources.",
    long_description=long_description,
    license="MIT",
    package_dir={"": "Lib"},
    packages=find_packages("Lib"),
    include_package_data=True,
    package_data={
        "ufokit.test": ["testdata/*.ufo/*", "testdata/*.ufo/*/*", "testdata/*.ufo/*/*/*"],
    },
    install_requires=[
        "fonttools[ufo,unicode] >= 4.10.0",
    ],
    extras_require={
        'lxml': ["fonttools[lxml] >= 4.10.0"],
        'test': ["pytest>=3.0.3"],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics :: Editors :: Vector-Based',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    python_requires='>=3.6',
    zip_safe=False,
)


if __name__ == "__main__":
    setup(**setup_params)
