"""
Number Theory Primitives

Implements the integer arithmetic that textbook RSA is built on:
- Euclid's algorithm (gcd)
- Euler's totient by direct counting (phi)
- Extended Euclidean Algorithm returning Bezout coefficients
- Modular multiplicative inverse
- Modular exponentiation by repeated squaring
- Smallest-coprime search (used to pick the RSA public exponent)

Note: Modular exponentiation is written out by hand rather than using
      Python's built-in pow(a, k, m), so the halving steps stay visible.
"""

from typing import Tuple


class NotInvertibleError(ValueError):
    """Raised when an element has no multiplicative inverse modulo m."""
    pass


def gcd(m: int, n: int) -> int:
    """
    Compute the greatest common divisor using Euclid's algorithm.

    gcd(m, 0) is m, so gcd(0, 0) is 0.

    Args:
        m: First integer
        n: Second integer

    Returns:
        Non-negative GCD of m and n
    """
    m, n = abs(m), abs(n)
    while n:
        m, n = n, m % n
    return m


def phi(x: int) -> int:
    """
    Count the integers y in the range 2..x+1 that are coprime to x.

    For x >= 1 this is Euler's totient (x + 1 stands in for 1, which
    is coprime to everything). phi(0) is 0 because the range is empty.

    Args:
        x: Non-negative integer

    Returns:
        Number of integers relatively prime to x
    """
    return sum(1 for y in range(2, x + 2) if gcd(x, y) == 1)


def compute_coeffs(a: int, b: int) -> Tuple[int, int]:
    """
    Extended Euclidean Algorithm.

    Finds Bezout coefficients u, v such that: a*u + b*v = gcd(a, b)

    Each step reduces (a, b) to (b, a mod b). If (u, v) solve the
    reduced problem then (v, u - q*v) solve the original one, where
    q is the quotient a // b.

    Args:
        a: First integer
        b: Second integer

    Returns:
        Tuple (u, v) where a*u + b*v = gcd(a, b)
    """
    if b == 0:
        return 1, 0

    q, r = divmod(a, b)
    u, v = compute_coeffs(b, r)

    return v, u - q * v


def inverse(a: int, m: int) -> int:
    """
    Compute the multiplicative inverse of a modulo m.

    Finds x such that (a * x) mod m = 1

    Args:
        a: The number to find inverse of
        m: The modulus

    Returns:
        Modular inverse of a mod m, in the range [0, m)

    Raises:
        ValueError: If m <= 0
        NotInvertibleError: If inverse doesn't exist (gcd(a, m) != 1)
    """
    if m <= 0:
        raise ValueError("Modulus must be positive")

    g = gcd(a, m)
    if g != 1:
        raise NotInvertibleError(
            f"Modular inverse doesn't exist (gcd({a}, {m}) = {g})"
        )

    u, _ = compute_coeffs(a, m)
    return u % m


def mod_pow(a: int, k: int, m: int) -> int:
    """
    Modular exponentiation by repeated squaring.

    Computes (a^k) mod m by halving the exponent at each step:
    - k = 0: 1 mod m
    - k = 1: a mod m
    - k even: (a^2)^(k/2), with the base reduced mod m first
    - k odd:  a * (a^2)^(k//2)

    Time complexity: O(log k) multiplications

    Args:
        a: The base
        k: The exponent (must be non-negative)
        m: The modulus (must be positive)

    Returns:
        (a^k) mod m

    Raises:
        ValueError: If k < 0 or m <= 0
    """
    if k < 0:
        raise ValueError("Exponent must be non-negative")
    if m <= 0:
        raise ValueError("Modulus must be positive")

    # Base cases
    if k == 0:
        return 1 % m
    if k == 1:
        return a % m

    squared = (a % m) ** 2 % m
    if k % 2 == 0:
        return mod_pow(squared, k // 2, m)
    return a * mod_pow(squared, k // 2, m) % m


def smallest_coprime_of(n: int) -> int:
    """
    Return the smallest integer greater than 1 that is coprime with n.

    Scans 2, 3, ... upward; n + 1 is always coprime with n, so the
    search stops by then.

    Args:
        n: Positive integer (typically Euler's totient of an RSA modulus)

    Returns:
        Smallest y >= 2 with gcd(n, y) == 1

    Raises:
        ValueError: If n < 1 (gcd(0, y) = y, so 0 has no coprime)
    """
    if n < 1:
        raise ValueError(f"No integer >= 2 is coprime with {n}")

    y = 2
    while gcd(n, y) != 1:
        y += 1
    return y
