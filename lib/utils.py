# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import binascii


class MilenageError(Exception):
    """Base class for every error raised while generating a vector"""


class InvalidEncoding(MilenageError):
    """decode_hex may raise this exception"""


class InvalidLength(MilenageError):
    """decode_hex and the fixed length buffers may raise this exception"""


class CipherFailure(MilenageError):
    """The block cipher rejected the key or the block"""


class RandomnessUnavailable(MilenageError):
    """The random source could not supply RAND"""


def decode_hex(value, length, name='value'):
    """
    Decode a hex string into exactly `length` bytes.

    The value itself is left out of the error text, since it is usually key material.
    """
    if not isinstance(value, str):
        raise InvalidEncoding(f"{name} must be a hex string, got {type(value).__name__}")
    try:
        decoded = binascii.unhexlify(value)
    except (binascii.Error, ValueError):
        raise InvalidEncoding(f"{name} is not valid hexadecimal")
    if len(decoded) != length:
        raise InvalidLength(f"{name} must be {length} bytes, got {len(decoded)}")
    return decoded
