from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup

HERE = Path(__file__).parent.resolve()
README = HERE / "README.md"
REQUIREMENTS = HERE / "requirements.txt"


_ = setup(
    name="nuonce",
    use_scm_version={
        "write_to": "nuonce/_version.py",
        "write_to_template": (
            'version = "{version}"  # this should be overwritten by setuptools_scm\n'
        ),
        "fallback_version": "1.0.0",
    },
    setup_requires=["setuptools_scm"],
    packages=find_packages(include=["nuonce", "nuonce.*"]),
    description="Call a function once, replay its first result forever after.",
    long_description=README.read_text(),
    long_description_content_type="text/markdown",
    install_requires=[
        r.strip() for r in REQUIREMENTS.read_text().splitlines() if r.strip()
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "ruff==0.2.1",
        ],
        "test": [
            "pytest>=8.0.0",
        ],
    },
    entry_points={"console_scripts": ["nuonce = nuonce.__main__:entry_point"]},
    keywords="once call-once memoize wrapper decorator proxy",
    license="MIT",
    python_requires=">=3.9",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
