# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
from utils import InvalidLength, decode_hex


class FixedBytes(bytes):
    """
    Immutable byte string of one exact length.
    Subclasses set `length`; building one from anything else raises InvalidLength.
    """
    length = 0

    def __new__(cls, value):
        value = bytes(value)
        if len(value) != cls.length:
            raise InvalidLength(f"{cls.__name__} must be {cls.length} bytes, got {len(value)}")
        return super().__new__(cls, value)

    @classmethod
    def from_hex(cls, value: str, name: str = None):
        return cls(decode_hex(value, cls.length, name or cls.__name__))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.hex()})"


class Key(FixedBytes):
    length = 16

    def __repr__(self):
        return "Key(...)"


class Op(FixedBytes):
    length = 16


class Opc(FixedBytes):
    length = 16


class Rand(FixedBytes):
    length = 16


class Sqn(FixedBytes):
    length = 6


class Amf(FixedBytes):
    length = 2


class MacA(FixedBytes):
    length = 8


class MacS(FixedBytes):
    length = 8


class Res(FixedBytes):
    length = 8


class Ck(FixedBytes):
    length = 16


class Ik(FixedBytes):
    length = 16


class Ak(FixedBytes):
    length = 6


class Autn(FixedBytes):
    length = 16


class Auts(FixedBytes):
    length = 14
