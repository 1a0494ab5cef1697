# Copyright 2020 The Magma Authors
# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: BSD-3-Clause
import abc


class BaseAuthAlgo(metaclass=abc.ABCMeta):
    """
    Abstract class for UMTS auth vector algorithms
    """

    def __init__(self, cipher=None, random_source=None):
        """
        Base constructor for auth algos built on a 128 bit block cipher.

        Args:
            cipher: object exposing encrypt(key, block) -> block, both 16 bytes.
                Defaults to AES-128 from the implementing module.
            random_source (callable): takes a byte count, returns that many
                random bytes. Defaults to a cryptographically secure source.
        """
        self.cipher = cipher if cipher is not None else self.default_cipher()
        self.random_source = random_source if random_source is not None else self.default_random_source

    @abc.abstractmethod
    def default_cipher(self):
        pass

    @abc.abstractmethod
    def default_random_source(self, count):
        pass

    @abc.abstractmethod
    def generate_auth_vector(self, key_hex, op_hex):
        """
        Generate the UMTS authentication vector.
        Args:
            key_hex (str): 128 bit subscriber key, hex encoded
            op_hex (str): 128 bit operator variant algorithm configuration field, hex encoded
        Returns:
            AuthVector with hex encoded RAND, XRES, CK, IK and AUTN
        """
        pass
