# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
from unittest import mock

import CryptoTool
from milenage import AES128Cipher, Milenage


class CountingCipher(AES128Cipher):
    def __init__(self):
        self.calls = 0

    def encrypt(self, key, block):
        self.calls += 1
        return super().encrypt(key, block)


def test_cryptotool_prints_vector(capsys):
    rc = CryptoTool.main(['--k', '465b5ce8b199b49faa5f0a2ee238a6bc', '--op', 'cdc202d5123e20f62b6d676ac72cb318'])
    assert rc == 0
    out = capsys.readouterr().out
    assert 'output opc:  cd63cb71954a9f4e48a5994e37a02baf' in out
    for label in ('rand', 'xres', 'ck', 'ik', 'autn'):
        assert f'output {label}' in out


def test_cryptotool_rejects_bad_key(capsys):
    rc = CryptoTool.main(['--k', 'abc', '--op', 'cdc202d5123e20f62b6d676ac72cb318'])
    assert rc == 1
    assert 'Error:' in capsys.readouterr().err


def test_cryptotool_derives_opc_once(capsys):
    cipher = CountingCipher()
    with mock.patch.object(CryptoTool, "Milenage", lambda: Milenage(cipher=cipher)):
        rc = CryptoTool.main(['--k', '465b5ce8b199b49faa5f0a2ee238a6bc', '--op', 'cdc202d5123e20f62b6d676ac72cb318'])
    assert rc == 0
    # OPc (1), f1 (2), f2345 (4)
    assert cipher.calls == 7
