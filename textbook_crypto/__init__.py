# Textbook Crypto
"""
Toy cryptography for learning: textbook RSA on hand-written number theory,
and a one-letter substitution cipher run in ECB and CBC modes.

Not for real use: keys are toy-scale and the alphabet has 26 letters.
"""

__version__ = "1.0.0"
