"""
Regression backends.

Available backends:
    CPUQRBackend: CPU reference implementation using QR decomposition
"""

from pyols.regression.backends.cpu import CPUQRBackend

__all__ = [
    "CPUQRBackend",
]
