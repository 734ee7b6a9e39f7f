"""Create an empty Minix V1 filesystem on a partition or image file."""

__version__ = "0.1.0"
__all__ = ["__version__"]