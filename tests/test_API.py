# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import unittest
from unittest import mock

import pytest

import apiService
from utils import CipherFailure

K = "465b5ce8b199b49faa5f0a2ee238a6bc"
OP = "cdc202d5123e20f62b6d676ac72cb318"


class API_Tests(unittest.TestCase):
    @pytest.fixture(autouse=True)
    def _client(self, api_client):
        self.client = api_client

    def test_A_API_Response(self):
        r = self.client.get('/swagger.json')
        self.assertEqual(r.status_code, 200, "Status Code should be 200 OK")

    def test_B_ping(self):
        r = self.client.get('/oam/ping')
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json(), {"result": "OK"})

    def test_C_vector(self):
        r = self.client.post('/milenage/vector', json={"key": K, "op": OP})
        self.assertEqual(r.status_code, 200)
        body = r.get_json()
        self.assertEqual(set(body), {"RAND", "XRES", "CK", "IK", "AUTN"})
        self.assertEqual([len(body[f]) for f in ("RAND", "XRES", "CK", "IK", "AUTN")], [32, 16, 32, 32, 32])

    def test_D_opc(self):
        r = self.client.post('/milenage/opc', json={"key": K, "op": OP})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json(), {"OPc": "cd63cb71954a9f4e48a5994e37a02baf"})

    def test_E_empty_body(self):
        r = self.client.post('/milenage/vector', data="", content_type="application/json")
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json()["reason"], "Request body is empty.")

    def test_F_missing_field(self):
        r = self.client.post('/milenage/vector', json={"key": K})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json()["reason"], 'Missing "op" or "key" in request body.')

    def test_G_invalid_hex(self):
        r = self.client.post('/milenage/vector', json={"key": "zz" * 16, "op": OP})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json()["result"], "Failed")

    def test_H_invalid_length(self):
        r = self.client.post('/milenage/opc', json={"key": K[:30], "op": OP})
        self.assertEqual(r.status_code, 400)

    def test_I_non_string_field(self):
        r = self.client.post('/milenage/vector', json={"key": 12345, "op": OP})
        self.assertEqual(r.status_code, 400)

    def test_J_internal_failure(self):
        with mock.patch.object(apiService.milenage, "generate_auth_vector", side_effect=CipherFailure("rejected")):
            r = self.client.post('/milenage/vector', json={"key": K, "op": OP})
        self.assertEqual(r.status_code, 500)
        self.assertEqual(r.get_json(), {"result": "Failed", "reason": "An internal server error occurred"})

    def test_K_not_found(self):
        r = self.client.get('/does/not/exist')
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.get_json(), {"Result": "Not Found"})

    def test_L_validation_error_keeps_input_out_of_logs(self):
        with mock.patch.object(apiService.logTool, "log") as log:
            r = self.client.post('/milenage/vector', json={"key": [4, 6, 5, 11], "op": OP})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json()["reason"], 'Fields "op" and "key" must be hex strings.')
        messages = [call.kwargs["message"] for call in log.call_args_list]
        self.assertTrue(any("key" in message for message in messages))
        for message in messages:
            self.assertNotIn("input_value", message)
            self.assertNotIn("[4, 6, 5, 11]", message)
