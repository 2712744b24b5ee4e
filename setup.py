"""
Setup file.
"""

from setuptools import find_packages, setup

KEYWORDS = "bpf ebpf clang compiler toolchain build libbpf"


if __name__ == "__main__":
    setup(
        name="bpfbuild",
        version="0.1.0",
        description="Compile BPF C programs into object files with clang",
        keywords=KEYWORDS,
        python_requires=">=3.8",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=["semver>=3.0"],
        extras_require={"test": ["pytest"]},
        entry_points={"console_scripts": ["bpfbuild = bpfbuild.cli:main"]},
    )
