# Copyright 2022-2023 Nick <nick@nickvsnetworking.com>
# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import argparse
import sys

from buffers import Key, Op
from milenage import Milenage
from utils import MilenageError


def build_parser():
    parser = argparse.ArgumentParser(description='UMTS Authentication Vector Generator Tool')
    parser.add_argument('--k', type=str, required=True, help='K Key')
    parser.add_argument('--op', type=str, required=True, help='OP Key')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    crypto_obj = Milenage()

    try:
        key = Key.from_hex(args.k, 'K')
        op = Op.from_hex(args.op, 'OP')
        print("Generating OPc key from OP & K")
        opc = crypto_obj.generate_opc(key, op)
        print("Generating Authentication Vector")
        vector = crypto_obj.build_auth_vector(key, opc)
    except MilenageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("output opc:  " + opc.hex())
    print("output rand: " + vector.RAND)
    print("output xres: " + vector.XRES)
    print("output ck:   " + vector.CK)
    print("output ik:   " + vector.IK)
    print("output autn: " + vector.AUTN)
    return 0


if __name__ == '__main__':
    sys.exit(main())
