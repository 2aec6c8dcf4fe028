#!/usr/bin/env python3

from setuptools import setup

setup(
    name="pngtext",
    version="1.0.0b1",
    description='A python package to read the textual data stored in png files',
    long_description="""A pure python package that walks the chunks of a png file,
    checks their CRC and decodes the tEXt, zTXt and iTXt chunks it contains""",
    license='GPL-3.0',
    classifiers=[
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'Topic :: Multimedia :: Graphics',
        'License :: OSI Approved :: GNU General Public License (GPL)',
        'Programming Language :: Python :: 3',
    ],
    keywords='png library metadata text tEXt zTXt iTXt',
    packages=["pngtext"],
    install_requires=['requests'],
    extras_require={
        'test': ['Pillow', 'pytest'],
    },
    python_requires='>=3.9',
    package_data={},
    data_files=[],
)
