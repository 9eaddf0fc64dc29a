"""
Hybrid Encryption (RSA + CBC Letter Cipher)

The message is encrypted with the fast symmetric letter cipher in CBC
mode, and only the symmetric key letter and IV letter are encrypted
("wrapped") with textbook RSA for the recipient.

Message Format:
    {"wrapped_key": int, "wrapped_iv": int, "ciphertext": str}

WARNING: Toy-scale RSA and a 26-letter alphabet. Learning purposes only.
"""

import json
from dataclasses import dataclass, asdict
from typing import Any, Dict

from .letter_cipher import ALPHABET_SIZE, cbc_decrypt, cbc_encrypt, to_char, to_int
from .rsa_math import Key, rsa_decrypt, rsa_encrypt


@dataclass(frozen=True)
class HybridMessage:
    """
    Container for hybrid-encrypted message components.
    """
    wrapped_key: int      # RSA-encrypted index of the key letter
    wrapped_iv: int       # RSA-encrypted index of the IV letter
    ciphertext: str       # CBC ciphertext (lowercase letters)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HybridMessage':
        return cls(
            wrapped_key=int(data['wrapped_key']),
            wrapped_iv=int(data['wrapped_iv']),
            ciphertext=str(data['ciphertext']),
        )

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), sort_keys=True)

    @classmethod
    def from_json(cls, json_str: str) -> 'HybridMessage':
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


def _check_modulus(key: Key) -> None:
    _, n = key
    if n < ALPHABET_SIZE:
        raise ValueError(
            f"Modulus {n} is too small to carry a letter index "
            f"(need n >= {ALPHABET_SIZE})"
        )


def wrap_letter(letter: str, public_key: Key) -> int:
    """
    Encrypt a key letter with RSA.

    Args:
        letter: Letter to protect
        public_key: Recipient's public key (e, n)

    Returns:
        RSA ciphertext of the letter's alphabet index

    Raises:
        ValueError: If n cannot hold every alphabet index
    """
    _check_modulus(public_key)
    return rsa_encrypt(to_int(letter), public_key)


def unwrap_letter(value: int, private_key: Key) -> str:
    """
    Decrypt a letter wrapped with wrap_letter.

    Raises:
        AlphabetError: If the decrypted value is not a letter index
            (wrong key or tampered value)
    """
    _check_modulus(private_key)
    return to_char(rsa_decrypt(value, private_key))


def hybrid_encrypt(message: str, key: str, iv: str,
                   public_key: Key) -> HybridMessage:
    """
    Encrypt a message for the holder of public_key.

    Args:
        message: Letters to encrypt
        key: Symmetric key letter
        iv: CBC initialisation vector letter
        public_key: Recipient's RSA public key (e, n)

    Returns:
        HybridMessage with wrapped key, wrapped IV and CBC ciphertext
    """
    return HybridMessage(
        wrapped_key=wrap_letter(key, public_key),
        wrapped_iv=wrap_letter(iv, public_key),
        ciphertext=cbc_encrypt(key, iv, message),
    )


def hybrid_decrypt(hybrid_message: HybridMessage, private_key: Key) -> str:
    """
    Decrypt a HybridMessage with the recipient's private key.

    Args:
        hybrid_message: Message produced by hybrid_encrypt
        private_key: Recipient's RSA private key (d, n)

    Returns:
        Decrypted plaintext (lowercase)
    """
    key = unwrap_letter(hybrid_message.wrapped_key, private_key)
    iv = unwrap_letter(hybrid_message.wrapped_iv, private_key)
    return cbc_decrypt(key, iv, hybrid_message.ciphertext)
