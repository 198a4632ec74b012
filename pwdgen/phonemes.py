#!/usr/bin/env python3
"""
Phoneme Tables
==============
Fixed onset and rime tables and the single-phoneme draw.

A phoneme is one onset (consonant cluster, capitalized) followed by one
rime (vowel cluster). Both are drawn uniformly, so every phoneme carries
the same entropy no matter which entries were picked.

Usage:
    from pwdgen.phonemes import phoneme

    text, bits = phoneme(rng)   # e.g. ("Bloon", 10.85...)
"""

from math import log2
from typing import Tuple

from pwdgen.random_source import RandomSource


# =============================================================================
# Tables
# =============================================================================

# "Ch" appears twice, which makes it twice as likely as the other onsets.
ONSETS = (
    "B", "Bl", "Br", "Bz", "C", "Ch", "Ch", "D", "Dj", "Dr",
    "F", "G", "Gl", "Gr", "H", "J", "K", "Kh", "Kl", "Kr", "L", "Ll", "M", "Mn",
    "N", "P", "Pl", "Pr", "Q", "R", "S", "Ss",
    "T", "Tch", "Ts", "V", "Vr", "W", "X",
    "Z", "Zd",
)

RIMES = (
    "a", "aa", "am", "an",
    "e", "ee", "eel", "eek", "eem", "een", "ei",
    "i", "ia", "ie", "im", "in", "io", "iom", "ion", "iot", "it", "iv", "ix",
    "o", "ol", "om", "on", "oo", "ool", "oom", "oon", "oor", "oot",
    "or", "ot", "ou", "ov", "ow", "ox",
    "u", "um", "un",
    "y", "ym", "yn",
)

# Bits contributed by one phoneme (~10.85)
PHONEME_ENTROPY = log2(len(ONSETS)) + log2(len(RIMES))


# =============================================================================
# Draw
# =============================================================================

def phoneme(rng: RandomSource) -> Tuple[str, float]:
    """
    Draw one onset and one rime.

    Args:
        rng: Randomness source; the onset is drawn before the rime.

    Returns:
        (text, entropy_bits) where entropy_bits is always PHONEME_ENTROPY
    """
    onset = ONSETS[rng.next_int(len(ONSETS))]
    rime = RIMES[rng.next_int(len(RIMES))]
    return onset + rime, PHONEME_ENTROPY


__all__ = [
    'ONSETS',
    'RIMES',
    'PHONEME_ENTROPY',
    'phoneme',
]
