# Core Cryptography Module
"""
Core cryptographic implementations including:
- Number theory (gcd, totient, extended Euclid, inverse, modular power)
- Textbook RSA
- Letter substitution cipher in ECB and CBC modes
- Hybrid RSA + CBC encryption
"""
