from setuptools import setup, find_packages

import bmfont


setup(
    name="bmfont",
    version=bmfont.__version__,
    packages=find_packages(),
    author="realitix",
    author_email="realitix@gmail.com",
    description="BMFont: Angel Code font character parser",
    long_description=open("README.md").read(),
    install_requires=['path', 'docopt'],
    setup_requires=[],
    tests_require=['pytest'],
    extras_require={'test': ['pytest']},
    include_package_data=True,
    package_data={'bmfont': ['asset/font/*.fnt']},
    entry_points={'console_scripts': ['bmfont = bmfont.cli:main']},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        'Programming Language :: Python :: Implementation :: CPython',
        "Topic :: Text Processing :: Fonts"
    ],
    license="Apache 2.0"
)
