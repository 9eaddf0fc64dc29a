"""
Letter Substitution Cipher with ECB and CBC Modes

A one-letter "block cipher" over the 26-letter Latin alphabet, where
encrypting a letter means adding the key letter to it (a Caesar shift),
run in two modes of operation:
- ECB (electronic codebook): every letter is shifted by the same key
- CBC (cipher block chaining): every letter is first combined with the
  previous ciphertext letter (the IV for the first one), then shifted

Letters are mapped to their position in the alphabet (a=0 ... z=25).
Input is case-insensitive; output is always lowercase.

This is for EDUCATIONAL/DEMONSTRATION purposes only - not secure!
"""

import logging
from typing import List


log = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)


class AlphabetError(ValueError):
    """Raised when a character or index falls outside the alphabet."""
    pass


# ============================================================================
# Alphabet Arithmetic
# ============================================================================

def to_int(c: str) -> int:
    """
    Return the position of a letter in the alphabet.

    Args:
        c: A single ASCII letter, lower or upper case

    Returns:
        Index 0-25

    Raises:
        AlphabetError: If c is not a single letter of the alphabet
    """
    if len(c) != 1:
        raise AlphabetError(f"Expected a single letter, got {c!r}")
    if 'a' <= c <= 'z':
        return ord(c) - ord('a')
    if 'A' <= c <= 'Z':
        return ord(c) - ord('A')
    raise AlphabetError(f"{c!r} is not a letter of the alphabet")


def to_char(n: int) -> str:
    """
    Return the n-th letter of the alphabet (lowercase).

    Raises:
        AlphabetError: If n is outside 0-25
    """
    if 0 <= n < ALPHABET_SIZE:
        return chr(n + ord('a'))
    raise AlphabetError(f"{n} is not an alphabet index (0-{ALPHABET_SIZE - 1})")


def add(a: str, b: str) -> str:
    """Add two letters modulo the alphabet size (z + b wraps to a)."""
    return to_char((to_int(a) + to_int(b)) % ALPHABET_SIZE)


def substract(a: str, b: str) -> str:
    """Subtract letter b from letter a modulo the alphabet size."""
    return to_char((to_int(a) - to_int(b)) % ALPHABET_SIZE)


def substract_rev(a: str, b: str) -> str:
    """Same as substract, but subtracts a from b (used by ecb_decrypt)."""
    return substract(b, a)


# ============================================================================
# ECB Mode
# ============================================================================

def ecb_encrypt(k: str, m: str) -> str:
    """
    ECB encryption with a block size of one letter.

    Every letter of m is shifted by the key letter k.

    Args:
        k: Key letter
        m: Message (letters only, may be empty)

    Returns:
        Ciphertext (lowercase)
    """
    return ''.join(add(k, x) for x in m)


def ecb_decrypt(k: str, c: str) -> str:
    """Inverse of ecb_encrypt."""
    return ''.join(substract_rev(k, x) for x in c)


# ============================================================================
# CBC Mode
# ============================================================================

def cbc_encrypt(k: str, v: str, m: str) -> str:
    """
    CBC encryption with a block size of one letter.

    Each letter x_i is encrypted to c_i where:
        c_1 = (x_1 + iv) + k
        c_i = (x_i + c_(i-1)) + k    for 1 < i <= len(m)

    Args:
        k: Key letter
        v: Initialisation vector (a letter)
        m: Message (letters only, may be empty)

    Returns:
        Ciphertext (lowercase)
    """
    blocks: List[str] = []
    previous = v
    for x in m:
        previous = add(add(x, previous), k)
        blocks.append(previous)
    return ''.join(blocks)


def cbc_decrypt(k: str, v: str, c: str) -> str:
    """
    Inverse of cbc_encrypt.

    Each ciphertext letter is decrypted with the previous ciphertext
    letter (the IV for the first one) as chaining value:
        x_i = (c_i - c_(i-1)) - k
    """
    blocks: List[str] = []
    previous = v
    for x in c:
        blocks.append(substract(substract(x, previous), k))
        previous = x
    return ''.join(blocks)


# ============================================================================
# Cipher Objects
# ============================================================================

class ECBCipher:
    """
    Letter cipher in ECB mode.

    Example:
        >>> cipher = ECBCipher('k')
        >>> cipher.encrypt("hello")
        'rovvy'
        >>> cipher.decrypt("rovvy")
        'hello'
    """

    def __init__(self, key: str):
        """
        Args:
            key: Key letter

        Raises:
            AlphabetError: If key is not a letter
        """
        to_int(key)
        self._key = key.lower()

    @property
    def key(self) -> str:
        return self._key

    def encrypt(self, plaintext: str) -> str:
        log.debug("ECB encrypt %d letters", len(plaintext))
        return ecb_encrypt(self._key, plaintext)

    def decrypt(self, ciphertext: str) -> str:
        log.debug("ECB decrypt %d letters", len(ciphertext))
        return ecb_decrypt(self._key, ciphertext)

    def __repr__(self) -> str:
        return f"ECBCipher(key={self._key!r})"


class CBCCipher:
    """
    Letter cipher in CBC mode.

    Unlike ECB, repeated plaintext letters do not produce repeated
    ciphertext letters.

    Example:
        >>> cipher = CBCCipher('k', 'q')
        >>> cipher.encrypt("hello")
        'hvqlj'
        >>> cipher.decrypt("hvqlj")
        'hello'
    """

    def __init__(self, key: str, iv: str):
        """
        Initialize the CBC cipher.

        Args:
            key: Key letter
            iv: Initialisation vector letter

        Raises:
            AlphabetError: If key or iv is not a letter
        """
        to_int(key)
        to_int(iv)
        self._key = key.lower()
        self._iv = iv.lower()

    @property
    def key(self) -> str:
        return self._key

    @property
    def iv(self) -> str:
        """Initialisation vector."""
        return self._iv

    def encrypt(self, plaintext: str) -> str:
        log.debug("CBC encrypt %d letters (iv=%s)", len(plaintext), self._iv)
        return cbc_encrypt(self._key, self._iv, plaintext)

    def decrypt(self, ciphertext: str) -> str:
        log.debug("CBC decrypt %d letters (iv=%s)", len(ciphertext), self._iv)
        return cbc_decrypt(self._key, self._iv, ciphertext)

    def __repr__(self) -> str:
        return f"CBCCipher(key={self._key!r}, iv={self._iv!r})"


# Self-test when run directly
if __name__ == "__main__":
    from ..harness.cases import LETTER_TEST_CASES
    from ..harness.suite import run_suite

    report = run_suite(LETTER_TEST_CASES)
    exit(0 if report.all_passed else 1)
