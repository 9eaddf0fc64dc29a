#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                        TEXTBOOK CRYPTO LIVE DEMO                             ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script walks a presenter through:
- Textbook RSA key generation from two small primes
- RSA encryption and decryption of an integer
- The letter cipher in ECB mode (and why repeated letters leak)
- The letter cipher in CBC mode
- Sending a CBC message whose key and IV are wrapped with RSA

Run with --no-pause to print everything without waiting for ENTER.
"""

import sys

from textbook_crypto.core_crypto.hybrid import HybridMessage, hybrid_decrypt, hybrid_encrypt
from textbook_crypto.core_crypto.letter_cipher import CBCCipher, ECBCipher
from textbook_crypto.core_crypto.number_theory import gcd, inverse
from textbook_crypto.core_crypto.rsa_math import RSAKeyPair


DEFAULT_DEMO_PRIMES = (101, 83)
DEMO_MESSAGE = "attackatdawn"


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(interactive, message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    if interactive:
        print(f"\n  [PAUSE] {message}")
        input()


def main(interactive=True, primes=DEFAULT_DEMO_PRIMES):

    print("\n" * 2)
    print("╔" + "═" * 68 + "╗")
    print("║" + "TEXTBOOK CRYPTO - RSA, ECB AND CBC".center(68) + "║")
    print("╚" + "═" * 68 + "╝")

    pause(interactive, "Press ENTER to begin the demonstration...")

    print_header("PART 1: TEXTBOOK RSA")

    p, q = primes
    print_step("1.1", f"Key generation from p = {p}, q = {q}")

    keypair = RSAKeyPair.from_primes(p, q)
    e, n = keypair.public_key
    d, _ = keypair.private_key
    k = (p - 1) * (q - 1)
    print(f"\n  n = p * q           = {n}")
    print(f"  k = (p - 1)(q - 1)  = {k}")
    print(f"  e (smallest coprime with k) = {e}   gcd(e, k) = {gcd(e, k)}")
    print(f"  d = inverse(e, k)           = {d}   e * d mod k = {e * d % k}")
    print(f"  Public key:  {keypair.public_key}")
    print(f"  Private key: {keypair.private_key}")
    inverse_ok = d == inverse(e, k)
    print(f"  {'[OK]' if inverse_ok else '[X]'} d is the inverse of e mod k")

    pause(interactive)

    print_step("1.2", "Encrypt and decrypt an integer")

    message = 4321 % n
    ciphertext = keypair.encrypt(message)
    decrypted = keypair.decrypt(ciphertext)
    print(f"\n  Message:    {message}")
    print(f"  Ciphertext: {ciphertext}  (= {message}^{e} mod {n})")
    print(f"  Decrypted:  {decrypted}  (= {ciphertext}^{d} mod {n})")
    print(f"  {'[OK]' if decrypted == message else '[X]'} Round trip")

    pause(interactive)

    print_header("PART 2: LETTER CIPHER MODES")

    print_step("2.1", "ECB mode, key 'k'")
    ecb = ECBCipher('k')
    ecb_ciphertext = ecb.encrypt(DEMO_MESSAGE)
    print(f"\n  Plaintext:  {DEMO_MESSAGE}")
    print(f"  Ciphertext: {ecb_ciphertext}")
    print(f"  Decrypted:  {ecb.decrypt(ecb_ciphertext)}")
    print("  [!] Equal plaintext letters give equal ciphertext letters")

    pause(interactive)

    print_step("2.2", "CBC mode, key 'k', IV 'q'")
    cbc = CBCCipher('k', 'q')
    cbc_ciphertext = cbc.encrypt(DEMO_MESSAGE)
    print(f"\n  Plaintext:  {DEMO_MESSAGE}")
    print(f"  Ciphertext: {cbc_ciphertext}")
    print(f"  Decrypted:  {cbc.decrypt(cbc_ciphertext)}")
    print("  [OK] Each letter depends on every letter before it")

    pause(interactive)

    print_header("PART 3: HYBRID ENCRYPTION")

    print_step("3.1", "Alice wraps the CBC key and IV with Bob's public key")
    sent = hybrid_encrypt(DEMO_MESSAGE, 'k', 'q', keypair.public_key)
    wire = sent.to_json()
    print(f"\n  On the wire: {wire}")

    print_step("3.2", "Bob unwraps them with his private key")
    received = HybridMessage.from_json(wire)
    plaintext = hybrid_decrypt(received, keypair.private_key)
    print(f"\n  Bob reads: {plaintext}")
    print(f"  {'[OK]' if plaintext == DEMO_MESSAGE else '[X]'} Message recovered")

    print("\n\n" + "═" * 70)
    print("  DEMONSTRATION COMPLETE!")
    print("═" * 70)

    return inverse_ok and plaintext == DEMO_MESSAGE and decrypted == message


if __name__ == "__main__":
    main(interactive="--no-pause" not in sys.argv[1:])
