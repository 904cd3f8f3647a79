import os
import fix_arm_sdk
from setuptools import setup, find_packages


def read(file_name: str) -> str:
    with open(os.path.join(os.path.dirname(__file__), file_name)) as of:
        return of.read()


def requirements(file_name: str) -> list:
    return [line for line in read(file_name).splitlines() if line and not line.startswith("#")]


setup(
    name=fix_arm_sdk.__title__,
    version=fix_arm_sdk.__version__,
    description=fix_arm_sdk.__description__,
    license=fix_arm_sdk.__license__,
    packages=find_packages(exclude=["test", "test.*", "tools"]),
    package_data={"fix_arm_sdk": ["py.typed"]},
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.9",
    install_requires=requirements("requirements.txt"),
    extras_require={
        "test": requirements("requirements-test.txt") + requirements("requirements-tools.txt"),
        "tools": requirements("requirements-tools.txt"),
    },
    classifiers=[
        # Current project status
        "Development Status :: 4 - Beta",
        # Audience
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        # License information
        "License :: OSI Approved :: Apache Software License",
        # Supported python versions
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        # Supported OS's
        "Operating System :: POSIX :: Linux",
        "Operating System :: Unix",
        # Extra metadata
        "Natural Language :: English",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ],
    keywords="azure arm cloud sdk",
)
