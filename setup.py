from setuptools import find_packages, setup

# Base requirements for the viewer
base_requirements = [
    "asciichartpy",
    "blessed",
    "pyyaml",
    "wcwidth",
]

# Requirements for development and testing
dev_requirements = [
    "pytest",
]

setup(
    name="sciview",
    version="0.1.0",
    description="Terminal file viewer for scientific data files with inline charts",
    packages=find_packages(include=["sciview", "sciview.*"]),
    license="MIT",
    python_requires=">=3.8",
    install_requires=base_requirements,
    extras_require={
        "all": base_requirements + dev_requirements,
        "dev": dev_requirements,
    },
    entry_points={
        "console_scripts": ["sciview=sciview.cli:main"],
    },
)
