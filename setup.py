""" bsvscript build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import bsvscript

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=bsvscript.name,
    version=bsvscript.__version__,
    url="https://github.com/bsvscript/bsvscript",
    project_urls={
        "GitHub": "https://github.com/bsvscript/bsvscript",
        "Issues": "https://github.com/bsvscript/bsvscript/issues",
    },
    license=bsvscript.__license__,
    author=bsvscript.__author__,
    author_email=bsvscript.__author_email__,
    description="Bitcoin SV script codec (binary, hex, ASM) and script templates",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses_json"],
    extras_require={"test": ["pytest"]},
    keywords="bitcoin bsv script asm opcodes metanet p2pkh",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
