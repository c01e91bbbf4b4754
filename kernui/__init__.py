"""Multi-part QR assembly, mnemonic QR decoding and display-independent UI component models."""

__version__ = "0.1.0"