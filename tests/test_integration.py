"""
Integration tests for Textbook Crypto.

Tests end-to-end workflows combining multiple modules.
"""

import json

import pytest

import live_demo
from textbook_crypto.core_crypto.hybrid import (
    HybridMessage, hybrid_decrypt, hybrid_encrypt, unwrap_letter, wrap_letter
)
from textbook_crypto.core_crypto.letter_cipher import AlphabetError, cbc_encrypt
from textbook_crypto.core_crypto.rsa_math import RSAKeyPair, gen_keys
from textbook_crypto.main import main


class TestHybridWorkflow:
    """RSA-wrapped key letters + CBC message."""

    def setup_method(self):
        self.alice_to_bob = RSAKeyPair.from_primes(613, 997)

    def test_wrap_unwrap_every_letter(self):
        public, private = gen_keys(101, 83)
        for letter in "abcdefghijklmnopqrstuvwxyz":
            assert unwrap_letter(wrap_letter(letter, public), private) == letter

    def test_wrapped_letter_is_rsa_of_index(self):
        # 'k' is index 10; 10^3 mod 8383 = 1000
        assert wrap_letter('k', (3, 8383)) == 1000

    def test_full_round_trip(self):
        """Sender encrypts, recipient decrypts with the private key only."""
        keys = self.alice_to_bob
        sent = hybrid_encrypt("meetmeatnoon", 'k', 'q', keys.public_key)
        assert sent.ciphertext == cbc_encrypt('k', 'q', "meetmeatnoon")
        assert hybrid_decrypt(sent, keys.private_key) == "meetmeatnoon"

    def test_json_round_trip(self):
        keys = self.alice_to_bob
        sent = hybrid_encrypt("bonjour", 'x', 'w', keys.public_key)
        wire = sent.to_json()
        assert set(json.loads(wire)) == {"wrapped_key", "wrapped_iv", "ciphertext"}

        received = HybridMessage.from_json(wire)
        assert received == sent
        assert hybrid_decrypt(received, keys.private_key) == "bonjour"

    def test_uppercase_message_comes_back_lowercase(self):
        keys = self.alice_to_bob
        sent = hybrid_encrypt("Hello", 'K', 'Q', keys.public_key)
        assert hybrid_decrypt(sent, keys.private_key) == "hello"

    def test_wrong_private_key(self):
        """A different key pair does not recover the message."""
        sent = hybrid_encrypt("attackatdawn", 'k', 'q', self.alice_to_bob.public_key)
        # 'k' is index 10; 10^5 mod 611161 = 100000
        assert sent.wrapped_key == 100000

        eve = RSAKeyPair.from_primes(401, 937)
        # 100000^213943 mod 375737 = 39333, not a letter index
        assert eve.decrypt(sent.wrapped_key) == 39333
        with pytest.raises(AlphabetError):
            hybrid_decrypt(sent, eve.private_key)

    def test_modulus_too_small_rejected(self):
        # gen_keys(2, 3) gives n = 6, which cannot carry 26 letter indexes
        public, private = gen_keys(2, 3)
        with pytest.raises(ValueError):
            wrap_letter('z', public)
        with pytest.raises(ValueError):
            unwrap_letter(1, private)


class TestCommandLine:
    """Tests for the textbook-crypto entry point."""

    def test_runs_all_tables(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "[cbc_decrypt]" in out
        assert "Overall:" in out

    def test_only_selected_table(self, capsys):
        assert main(["--only", "gen_keys"]) == 0
        out = capsys.readouterr().out
        assert "[gen_keys] 8/8" in out
        assert "[gcd]" not in out

    def test_unknown_table(self, capsys):
        assert main(["--only", "nope"]) == 2
        assert "nope" in capsys.readouterr().err

    def test_list(self, capsys):
        assert main(["--list"]) == 0
        assert "mod_pow (13 cases)" in capsys.readouterr().out


class TestLiveDemo:
    """The presenter demo runs end to end without pauses."""

    def test_demo_completes(self, capsys):
        assert live_demo.main(interactive=False)
        out = capsys.readouterr().out
        assert "Public key:  (3, 8383)" in out
        assert "[OK] d is the inverse of e mod k" in out
        assert "[X]" not in out
        assert "DEMONSTRATION COMPLETE!" in out

    def test_demo_with_other_primes(self, capsys):
        assert live_demo.main(interactive=False, primes=(17, 23))
        assert "Private key: (235, 391)" in capsys.readouterr().out
