"""
Literal test tables for every core_crypto function.

Rows are (input, expected). Functions taking several arguments get their
input as a tuple; see uncurry/uncurry3.
"""

from ..core_crypto.letter_cipher import (
    add, cbc_decrypt, cbc_encrypt, ecb_decrypt, ecb_encrypt,
    substract, to_char, to_int
)
from ..core_crypto.number_theory import (
    compute_coeffs, gcd, inverse, mod_pow, phi, smallest_coprime_of
)
from ..core_crypto.rsa_math import gen_keys, rsa_decrypt, rsa_encrypt
from .suite import TestCase, uncurry, uncurry3


# ============================================================================
# Asymmetric encryption
# ============================================================================

GCD_CASES = [
    ((0, 0), 0),
    ((0, 8), 8),
    ((8, 0), 8),
    ((3, 3), 3),
    ((12, 16), 4),
    ((16, 12), 4),
    ((65, 40), 5),
    ((28, 39), 1),
    ((735, 1239), 21),
    ((743268, 3349890), 6),
]

PHI_CASES = [
    (0, 0),
    (1, 1),
    (2, 1),
    (6, 2),
    (18, 6),
    (17, 16),
    (31, 30),
    (35, 24),
    (77, 60),
    (390, 96),
    (38827, 37840),
]

MOD_POW_CASES = [
    ((0, 0, 1), 0),
    ((1, 1, 1), 0),
    ((1, 1, 2), 1),
    ((13481, 11237, 6), 5),
    ((8, 0, 1), 0),
    ((8, 0, 5), 1),
    ((237, 1, 1000), 237),
    ((859237, 1, 1000), 237),
    ((33893, 2, 10000), 5449),
    ((39408, 34989, 47832), 9672),
    ((7433893, 2, 10000), 5449),
    ((13481503, 11237126, 46340), 6629),
    ((3943829034, 93847829, 3432784932), 2278550484),
]

COMPUTE_COEFFS_CASES = [
    ((0, 0), (1, 0)),
    ((0, 8), (0, 1)),
    ((12, 16), (-1, 1)),
    ((16, 12), (1, -1)),
    ((65, 40), (-3, 5)),
    ((735, 1239), (27, -16)),
    ((432342, 847398), (4412, -2251)),
    ((34248920, 432143278), (-49830139, 3949219)),
]

INVERSE_CASES = [
    ((11, 16), 3),
    ((4, 15), 4),
    ((18, 35), 2),
    ((35, 18), 17),
    ((12, 91), 38),
    ((34, 91), 83),
    ((64, 91), 64),
    ((347, 288), 83),
    ((38749, 1298), 965),
]

SMALLEST_COPRIME_OF_CASES = [
    (1, 2),
    (2, 3),
    (12, 5),
    (13, 2),
    (30, 7),
    (120, 7),
    (210, 11),
    (622702080, 17),
]

GEN_KEYS_CASES = [
    ((2, 3), ((3, 6), (1, 6))),
    ((17, 23), ((3, 391), (235, 391))),
    ((101, 83), ((3, 8383), (5467, 8383))),
    ((401, 937), ((7, 375737), (213943, 375737))),
    ((613, 997), ((5, 611161), (243821, 611161))),
    ((3948, 2737), ((5, 10805676), (4319597, 10805676))),
    ((26641, 26437), ((7, 704308117), (100607863, 704308117))),
    ((33432890, 9487389),
     ((3, 317190832824210), (105730263301311, 317190832824210))),
]

RSA_ENCRYPT_CASES = [
    ((4, (2, 7)), 2),
    ((4321, (3, 8383)), 3694),
    ((324561, (5, 611161)), 133487),
    ((1234, (5, 611161)), 320878),
    ((704308111, (7, 704308117)), 704028181),
    ((4352843920, (8432, 433374892)), 308763132),
]

RSA_DECRYPT_CASES = [
    ((4, (2, 7)), 2),
    ((3694, (5467, 8383)), 4321),
    ((133487, (243821, 611161)), 324561),
    ((320878, (243821, 611161)), 1234),
    ((704028181, (100607863, 704308117)), 704308111),
    ((4352843920, (8432, 433374892)), 308763132),
]


# ============================================================================
# Symmetric encryption
# ============================================================================

TO_INT_CASES = [
    ('a', 0),
    ('z', 25),
    ('h', 7),
    ('l', 11),
    ('o', 14),
]

TO_CHAR_CASES = [
    (0, 'a'),
    (25, 'z'),
    (7, 'h'),
    (3, 'd'),
    (10, 'k'),
]

ADD_CASES = [
    (('a', 'a'), 'a'),
    (('d', 's'), 'v'),
    (('w', 't'), 'p'),
    (('s', 's'), 'k'),
    (('a', 'z'), 'z'),
    (('z', 'z'), 'y'),
]

SUBSTRACT_CASES = [
    (('a', 'a'), 'a'),
    (('v', 's'), 'd'),
    (('p', 'w'), 't'),
    (('a', 'z'), 'b'),
    (('e', 'p'), 'p'),
    (('y', 'h'), 'r'),
]

ECB_ENCRYPT_CASES = [
    (('w', ""), ""),
    (('d', "w"), "z"),
    (('x', "bonjour"), "ylkglro"),
    (('k', "hello"), "rovvy"),
    (('s', "haskell"), "zskcwdd"),
    (('g', "moonlight"), "suutromnz"),
]

ECB_DECRYPT_CASES = [
    (('w', ""), ""),
    (('d', "z"), "w"),
    (('x', "ylkglro"), "bonjour"),
    (('k', "rovvy"), "hello"),
    (('p', "bruv"), "mcfg"),
    (('a', "computing"), "computing"),
]

CBC_ENCRYPT_CASES = [
    (('w', 'i', ""), ""),
    (('d', 'i', "w"), "h"),
    (('x', 'w', "bonjour"), "ufpvgxl"),
    (('k', 'q', "hello"), "hvqlj"),
    (('d', 'o', "haskell"), "ybwjqes"),
    (('f', 'g', "sdfahsjdfklafshjkl"), "dlvamjxfpeuzjgsgvl"),
]

CBC_DECRYPT_CASES = [
    (('w', 'i', ""), ""),
    (('d', 'i', "h"), "w"),
    (('x', 'w', "ufpvgxl"), "bonjour"),
    (('k', 'q', "hvqlj"), "hello"),
    (('d', 'w', "wdaijodajiof"), "xeufycmugwdo"),
    (('f', 'r', "ddsafhdsjkfhajlk"), "hvkdaxrkmwqxoexu"),
]


# ============================================================================
# Tables
# ============================================================================

NUMBER_THEORY_TEST_CASES = [
    TestCase("gcd", uncurry(gcd), GCD_CASES),
    TestCase("phi", phi, PHI_CASES),
    TestCase("mod_pow", uncurry3(mod_pow), MOD_POW_CASES),
    TestCase("compute_coeffs", uncurry(compute_coeffs), COMPUTE_COEFFS_CASES),
    TestCase("inverse", uncurry(inverse), INVERSE_CASES),
    TestCase("smallest_coprime_of", smallest_coprime_of, SMALLEST_COPRIME_OF_CASES),
]

RSA_TEST_CASES = [
    TestCase("gen_keys", uncurry(gen_keys), GEN_KEYS_CASES),
    TestCase("rsa_encrypt", uncurry(rsa_encrypt), RSA_ENCRYPT_CASES),
    TestCase("rsa_decrypt", uncurry(rsa_decrypt), RSA_DECRYPT_CASES),
]

LETTER_TEST_CASES = [
    TestCase("to_int", to_int, TO_INT_CASES),
    TestCase("to_char", to_char, TO_CHAR_CASES),
    TestCase("add", uncurry(add), ADD_CASES),
    TestCase("substract", uncurry(substract), SUBSTRACT_CASES),
    TestCase("ecb_encrypt", uncurry(ecb_encrypt), ECB_ENCRYPT_CASES),
    TestCase("ecb_decrypt", uncurry(ecb_decrypt), ECB_DECRYPT_CASES),
    TestCase("cbc_encrypt", uncurry3(cbc_encrypt), CBC_ENCRYPT_CASES),
    TestCase("cbc_decrypt", uncurry3(cbc_decrypt), CBC_DECRYPT_CASES),
]

ALL_TEST_CASES = NUMBER_THEORY_TEST_CASES + RSA_TEST_CASES + LETTER_TEST_CASES
