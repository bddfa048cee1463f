"""motus: random passwords, PINs and passphrases with a security report."""

__version__ = "0.1.0"
