"""
RSA Mathematical Operations Implementation

Textbook RSA on top of the number theory primitives:
- Key pair generation from two given primes
- Encryption (x^e mod n)
- Decryption (c^d mod n), the same operation with the other key

Symmetric schemes are fast and take data of any size, but the key has to
be shared somehow. RSA is slow and only takes values smaller than the
modulus n, so in practice it carries the symmetric key while a symmetric
cipher carries the data (see hybrid.py).

WARNING: Key sizes here are toy-scale. This is for learning purposes only.
"""

import logging
from typing import Tuple

from .number_theory import inverse, mod_pow, smallest_coprime_of


log = logging.getLogger(__name__)

Key = Tuple[int, int]


def gen_keys(p: int, q: int) -> Tuple[Key, Key]:
    """
    Generate an RSA key pair from two distinct primes.

    1. Compute the RSA modulus n = p * q
    2. Compute k = (p - 1)(q - 1)
    3. Choose the smallest e > 1 such that gcd(e, k) = 1
    4. Compute d such that e * d = 1 (mod k)

    Args:
        p: First prime
        q: Second prime (distinct from p)

    Returns:
        Tuple of ((e, n), (d, n)) where:
        - (e, n) is the public key
        - (d, n) is the private key

    Raises:
        ValueError: If (p - 1)(q - 1) < 1
    """
    n = p * q
    k = (p - 1) * (q - 1)

    e = smallest_coprime_of(k)
    d = inverse(e, k)

    log.debug("gen_keys(%d, %d): n=%d, k=%d, e=%d, d=%d", p, q, n, k, e, d)

    public_key = (e, n)
    private_key = (d, n)

    return public_key, private_key


def rsa_encrypt(x: int, public_key: Key) -> int:
    """
    RSA encryption of a plain text integer.

    Computes ciphertext = x^e mod n. Values of x larger than n are
    reduced modulo n.

    Args:
        x: Integer message
        public_key: Tuple (e, n)

    Returns:
        Encrypted ciphertext as integer
    """
    e, n = public_key
    return mod_pow(x, e, n)


def rsa_decrypt(c: int, private_key: Key) -> int:
    """
    RSA decryption of a ciphertext.

    Computes message = c^d mod n, which is exactly rsa_encrypt
    applied with the private key.
    """
    return rsa_encrypt(c, private_key)


class RSAKeyPair:
    """
    RSA key pair container with convenient methods.

    Example:
        >>> keypair = RSAKeyPair.from_primes(101, 83)
        >>> keypair.public_key
        (3, 8383)
        >>> keypair.encrypt(4321)
        3694
        >>> keypair.decrypt(3694)
        4321
    """

    def __init__(self, public_key: Key, private_key: Key):
        """
        Initialize with existing keys.

        Args:
            public_key: Tuple (e, n)
            private_key: Tuple (d, n)

        Raises:
            ValueError: If the two keys use different moduli
        """
        if public_key[1] != private_key[1]:
            raise ValueError("Public and private key must share the modulus n")
        self._public_key = public_key
        self._private_key = private_key
        self._e, self._n = public_key
        self._d, _ = private_key

    @classmethod
    def from_primes(cls, p: int, q: int) -> 'RSAKeyPair':
        """Generate a key pair from two distinct primes."""
        public_key, private_key = gen_keys(p, q)
        return cls(public_key, private_key)

    @property
    def public_key(self) -> Key:
        """Public key (e, n)."""
        return self._public_key

    @property
    def private_key(self) -> Key:
        """Private key (d, n)."""
        return self._private_key

    @property
    def modulus(self) -> int:
        return self._n

    @property
    def public_exponent(self) -> int:
        return self._e

    @property
    def private_exponent(self) -> int:
        return self._d

    @property
    def key_size(self) -> int:
        """Key size in bits."""
        return self._n.bit_length()

    def encrypt(self, message: int) -> int:
        """Encrypt a message using public key."""
        return rsa_encrypt(message, self._public_key)

    def decrypt(self, ciphertext: int) -> int:
        """Decrypt a ciphertext using private key."""
        return rsa_decrypt(ciphertext, self._private_key)

    def __repr__(self) -> str:
        return f"RSAKeyPair(bits={self.key_size}, e={self._e}, n={self._n})"


# Self-test when run directly
if __name__ == "__main__":
    from ..harness.cases import RSA_TEST_CASES
    from ..harness.suite import run_suite

    report = run_suite(RSA_TEST_CASES)
    exit(0 if report.all_passed else 1)
