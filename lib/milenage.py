# Copyright 2016-present, Facebook, Inc.
# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: BSD-3-Clause
import logging

from Crypto.Cipher import AES
from Crypto.Random import get_random_bytes

from baseModels import AuthVector
from buffers import Ak, Amf, Autn, Auts, Ck, Ik, Key, MacA, MacS, Op, Opc, Rand, Res, Sqn
from lte import BaseAuthAlgo
from utils import CipherFailure, RandomnessUnavailable

CryptoLogger = logging.getLogger('CryptoLogger')

# Constants from 3GPP 35.206 4.1, r1..r5 in bits and c1..c5 as 128 bit big endian
R = (64, 0, 32, 64, 96)
C = (
    bytes(16),
    bytes(15) + b'\x01',
    bytes(15) + b'\x02',
    bytes(15) + b'\x04',
    bytes(15) + b'\x08',
)

MASK128 = (1 << 128) - 1


class AES128Cipher:
    """
    Rijndael (AES-128) cipher function used by Milenage.
    One 16 byte block per call, ECB, no IV and no padding.
    """
    block_size = 16

    def encrypt(self, key, block):
        if len(key) != 16 or len(block) != self.block_size:
            raise CipherFailure(f"AES-128 needs a 16 byte key and block, got {len(key)} and {len(block)}")
        try:
            return AES.new(bytes(key), AES.MODE_ECB).encrypt(bytes(block))
        except (ValueError, TypeError) as e:
            raise CipherFailure(f"AES-128 encryption failed: {e}") from e


class Milenage(BaseAuthAlgo):
    """
    Milenage Algorithm (3GPP TS 35.205, .206, .207, .208)

    SQN and AMF are fixed to zero; no sequence number state is kept between calls.
    """

    SQN = Sqn(bytes(6))
    AMF = Amf(bytes(2))

    def default_cipher(self):
        return AES128Cipher()

    def default_random_source(self, count):
        return get_random_bytes(count)

    def generate_auth_vector(self, key_hex, op_hex):
        """
        Generate the UMTS authentication vector.
        Args:
            key_hex (str): 128 bit subscriber key, hex encoded
            op_hex (str): 128 bit operator variant algorithm configuration field, hex encoded
        Returns:
            AuthVector: RAND, XRES, CK, IK and AUTN as lower case hex
        Raises:
            InvalidEncoding, InvalidLength before any cipher call is made,
            CipherFailure, RandomnessUnavailable
        """
        CryptoLogger.debug("Called milenage.generate_auth_vector")
        key = Key.from_hex(key_hex, 'key')
        op = Op.from_hex(op_hex, 'op')

        opc = self.generate_opc(key, op)
        CryptoLogger.debug("Generated OPc")
        return self.build_auth_vector(key, opc)

    def build_auth_vector(self, key, opc):
        """
        Generate the vector from an already decoded key and derived OPc.
        Args:
            key (bytes): 128 bit subscriber key
            opc (bytes): 128 bit OP_c
        Returns:
            AuthVector: RAND, XRES, CK, IK and AUTN as lower case hex
        """
        rand = self.generate_rand()
        CryptoLogger.debug("Generated RAND " + rand.hex())

        mac_a = self.f1(key, opc, rand, self.SQN, self.AMF)
        res, ck, ik, ak = self.f2345(key, opc, rand)
        autn = self.generate_autn(self.SQN, ak, mac_a, self.AMF)
        CryptoLogger.debug("Successfully ran milenage.generate_auth_vector")

        return AuthVector(
            RAND=rand.hex(),
            XRES=res.hex(),
            CK=ck.hex(),
            IK=ik.hex(),
            AUTN=autn.hex(),
        )

    def generate_auts(self, key, opc, rand, sqn):
        """
        Compute AUTS for re-synchronization using the formula
            AUTS = SQN_MS ^ AK || f1*(SQN_MS || RAND || AMF*)
        Args:
            key (bytes): 128 bit subscriber key
            opc (bytes): 128 bit operator variant algorithm configuration field
            rand (bytes): 128 bit random challenge
            sqn (int): 48 bit sequence number
        Returns:
            auts (bytes): 112 bit authentication token
        """
        sqn_bytes = Sqn(sqn.to_bytes(6, byteorder='big'))
        ak = self.f5_star(key, opc, rand)
        mac_s = self.f1_star(key, opc, rand, sqn_bytes, self.AMF)
        return Auts(xor(sqn_bytes, ak) + mac_s)

    def generate_resync(self, auts, key, opc, rand):
        """
        Compute SQN_MS and MAC-S from AUTS for re-synchronization
            AUTS = SQN_MS ^ AK || f1*(SQN_MS || RAND || AMF*)
        Args:
            auts (bytes): 112 bit authentication token from client key
            key (bytes): 128 bit subscriber key
            opc (bytes): 128 bit operator variant algorithm configuration field
            rand (bytes): 128 bit random challenge
        Returns:
            sqn_ms (int), 48 bit sequence number from client
            mac_s (bytes), 64 bit resync authentication code expected for sqn_ms
        """
        auts = Auts(auts)
        ak = self.f5_star(key, opc, rand)
        sqn_ms = Sqn(xor(auts[:6], ak))
        mac_s = self.f1_star(key, opc, rand, sqn_ms, self.AMF)
        return int.from_bytes(sqn_ms, byteorder='big'), mac_s

    def encrypt(self, key, block):
        return self.cipher.encrypt(key, block)

    def generate_rand(self):
        """
        Generate RAND for Milenage
        Returns:
            (Rand) 128 random bits
        """
        try:
            rand = self.random_source(Rand.length)
            rand_length = len(rand)
        except Exception as e:
            raise RandomnessUnavailable(f"Unable to read {Rand.length} random bytes: {e}") from e
        if rand_length != Rand.length:
            raise RandomnessUnavailable(f"Random source did not return {Rand.length} bytes")
        return Rand(rand)

    def generate_opc(self, key, op):
        """
        Generate the OP_c according to 3GPP 35.205 8.2
        Args:
            key (bytes): 128 bit subscriber key
            op (bytes): 128 bit operator dependent value
        Returns:
            128 bit OP_c
        """
        return Opc(xor(self.encrypt(key, op), op))

    def _out1(self, key, opc, rand, sqn, amf):
        # TEMP = E_K(RAND XOR OP_C)
        temp = self.encrypt(key, xor(rand, opc))

        # IN1 = SQN || AMF || SQN || AMF
        in1 = (bytes(Sqn(sqn)) + bytes(Amf(amf))) * 2

        # OUT1 = E_K(TEMP XOR rotate(IN1 XOR OP_C, r1) XOR c1) XOR OP_C
        out1_ = self.encrypt(key, xor(xor(temp, rotate_left_128(xor(in1, opc), R[0])), C[0]))
        return xor(opc, out1_)

    def f1(self, key, opc, rand, sqn, amf):
        """
        Implementation of f1, the network authentication function according to
        3GPP 35.206 4.1

        Args:
            key (bytes): 128 bit subscriber key
            opc (bytes): 128 bit computed from OP and subscriber key
            rand (bytes): 128 bit random challenge
            sqn (bytes): 48 bit sequence number
            amf (bytes): 16 bit authentication management field
        Returns:
            MAC-A = OUT1[0] .. OUT1[63]
        """
        return MacA(self._out1(key, opc, rand, sqn, amf)[:8])

    def f1_star(self, key, opc, rand, sqn, amf):
        """
        Implementation of f1*, the re-synchronisation message authentication function.
        Same arguments as f1.

        Returns:
            MAC-S = OUT1[64] .. OUT1[127]
        """
        return MacS(self._out1(key, opc, rand, sqn, amf)[8:])

    def _out(self, key, opc, temp, index):
        # OUTi = E_K(rotate(TEMP XOR OP_C, ri) XOR ci) XOR OP_C, index is 1 based
        rotated = rotate_left_128(xor(temp, opc), R[index - 1])
        return xor(self.encrypt(key, xor(rotated, C[index - 1])), opc)

    def f2345(self, key, opc, rand):
        """
        Implementation of f2, f3, f4 and f5, the response, confidentiality key,
        integrity key and anonymity key functions according to 3GPP 35.206 4.1

        Args:
            key (bytes): 128 bit subscriber key
            opc (bytes): 128 bit computed from OP and subscriber key
            rand (bytes): 128 bit random challenge
        Returns:
            (res, ck, ik, ak)
                res = f2 = OUT2[64] .. OUT2[127]
                ck = f3 = OUT3
                ik = f4 = OUT4
                ak = f5 = OUT2[0] .. OUT2[47]
        """
        temp = self.encrypt(key, xor(rand, opc))
        out2 = self._out(key, opc, temp, 2)
        out3 = self._out(key, opc, temp, 3)
        out4 = self._out(key, opc, temp, 4)
        return Res(out2[8:16]), Ck(out3), Ik(out4), Ak(out2[0:6])

    def f5_star(self, key, opc, rand):
        """
        Implementation of f5*, the re-synchronisation anonymity key according
        to 3GPP 35.206 4.1

        Returns:
            ak, 48 bit anonymity key = OUT5[0] .. OUT5[47]
        """
        temp = self.encrypt(key, xor(rand, opc))
        return Ak(self._out(key, opc, temp, 5)[:6])

    @classmethod
    def generate_autn(cls, sqn, ak, mac_a, amf):
        """
        Generate network authentication token as defined in 3GPP 33.102 6.3.2

        Args:
            sqn (bytes): 48 bit sequence number
            ak (bytes): 48 bit anonymity key
            mac_a (bytes): 64 bit network authentication code
            amf (bytes): 16 bit authentication management field
        Returns:
            autn (bytes): 128 bit authentication token
        """
        return Autn(xor(Sqn(sqn), Ak(ak)) + bytes(Amf(amf)) + bytes(MacA(mac_a)))


def xor(s1, s2):
    """
    Exclusive-Or of two byte arrays

    Args:
        s1 (bytes): first set of bytes
        s2 (bytes): second set of bytes
    Returns:
        (bytes) s1 ^ s2
    Raises:
        ValueError if s1 and s2 lengths don't match
    """
    if len(s1) != len(s2):
        raise ValueError('Input not equal length, s1 is %d bytes and s2 is %d bytes' % (len(s1), len(s2)))
    return bytes(a ^ b for a, b in zip(s1, s2))


def rotate_left_128(input_s, bits):
    """
    Rotate a 128 bit big endian value left by a number of bits

    Args:
        input_s (bytes): 16 byte input
        bits (int): non negative bit count, taken modulo 128
    Returns:
        (bytes) input_s rotated by bits
    """
    if len(input_s) != 16:
        raise ValueError('rotate_left_128 needs 16 bytes, got %d' % len(input_s))
    if bits < 0:
        raise ValueError('bit count must not be negative')
    bits %= 128
    value = int.from_bytes(input_s, byteorder='big')
    rotated = ((value << bits) | (value >> (128 - bits))) & MASK128
    return rotated.to_bytes(16, byteorder='big')
