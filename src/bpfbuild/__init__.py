"""bpfbuild - compile BPF C programs into object files with clang."""

__version__ = "0.1.0"
