# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
from pydantic import BaseModel


class AuthVectorRequest(BaseModel):
    key: str
    op: str


class AuthVector(BaseModel):
    RAND: str
    XRES: str
    CK: str
    IK: str
    AUTN: str


class OpcResult(BaseModel):
    OPc: str
