"""
motus.charsets
Character classes the generators draw from.
"""

import string

LETTERS = string.ascii_letters  # a-z then A-Z
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()"
