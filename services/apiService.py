# Copyright 2022-2023 Nick <nick@nickvsnetworking.com>
# Copyright 2023 David Kneipp <david@davidkneipp.com>
# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import os
import sys
import socket
import traceback
from flask import Flask, request
from flask_restx import Api, Resource, fields
from pydantic import ValidationError
from werkzeug.middleware.proxy_fix import ProxyFix
sys.path.append(os.path.realpath(os.path.dirname(__file__) + "/../lib"))
from banners import Banners
from baseModels import AuthVectorRequest, OpcResult
from buffers import Key, Op
from logtool import LogTool
from milenage import Milenage
from pyauc_config import config
from utils import InvalidEncoding, InvalidLength

siteName = config.get("api", {}).get("site_name", "")
originHostname = socket.gethostname()

logTool = LogTool(config)
banners = Banners()

apiLogFile = config.get('logging', {}).get('logfiles', {}).get('api_logging_file')
if apiLogFile:
    logTool.setupFileLogger(loggerName='CryptoLogger', logFilePath=apiLogFile)

milenage = Milenage()

apiService = Flask(__name__)
apiService.wsgi_app = ProxyFix(apiService.wsgi_app)
api = Api(apiService, version='1.0', title=f'{siteName + " - " if siteName else ""}{originHostname} - PyAuC API',
    description='Restful API for generating UMTS authentication vectors',
    doc='/docs/'
)

ns_milenage = api.namespace('milenage', description='PyAuC Milenage Functions')
ns_oam = api.namespace('oam', description='PyAuC OAM Functions')

auth_request_model = api.model('Auth Vector Request', {
    'key': fields.String(required=True, description='128 bit subscriber key K, hex encoded'),
    'op': fields.String(required=True, description='128 bit operator variant OP, hex encoded'),
})


def handle_exception(e):

    if isinstance(e, ValidationError):
        # pydantic error text carries the rejected input, which may be key material
        errorFields = [".".join(str(loc) for loc in error['loc']) for error in e.errors(include_input=False)]
        logTool.log(service='API', level='error', message=f"[API] Request validation failed for fields: {errorFields}")
    else:
        logTool.log(service='API', level='error', message=f"[API] An error occurred: {e}")
    response_json = {'result': 'Failed'}

    if isinstance(e, (InvalidEncoding, InvalidLength)):
        response_json['reason'] = str(e)
        return response_json, 400
    elif isinstance(e, ValidationError):
        response_json['reason'] = 'Fields "op" and "key" must be hex strings.'
        return response_json, 400
    else:
        response_json['reason'] = 'An internal server error occurred'
        logTool.log(service='API', level='error', message=f"[API] Additional Error Information: {traceback.format_exc()}")
        return response_json, 500


def parse_auth_request():
    """
    Returns (AuthVectorRequest, None) or (None, error response) for the current request body.
    """
    body = request.get_json(silent=True)
    if not body or not isinstance(body, dict):
        return None, ({'result': 'Failed', 'reason': 'Request body is empty.'}, 400)
    if not body.get('op') or not body.get('key'):
        return None, ({'result': 'Failed', 'reason': 'Missing "op" or "key" in request body.'}, 400)
    return AuthVectorRequest(key=body['key'], op=body['op']), None


@apiService.errorhandler(404)
def page_not_found(e):
    return  {"Result": "Not Found"}, 404


@ns_milenage.route('/vector')
class PyAuC_Milenage_Vector(Resource):
    @ns_milenage.doc('Generate a 3G Authentication Vector')
    @ns_milenage.expect(auth_request_model)
    def post(self):
        '''Generate RAND, XRES, CK, IK and AUTN from K and OP'''
        try:
            authRequest, errorResponse = parse_auth_request()
            if errorResponse is not None:
                logTool.log(service='API', level='warning', message=f"[API] Rejected vector request: {errorResponse[0]['reason']}")
                return errorResponse
            vector = milenage.generate_auth_vector(authRequest.key, authRequest.op)
            logTool.log(service='API', level='debug', message=f"[API] Generated vector with RAND {vector.RAND}")
            return vector.model_dump(), 200
        except Exception as E:
            return handle_exception(E)


@ns_milenage.route('/opc')
class PyAuC_Milenage_OPc(Resource):
    @ns_milenage.doc('Derive OPc')
    @ns_milenage.expect(auth_request_model)
    def post(self):
        '''Derive OPc from K and OP'''
        try:
            authRequest, errorResponse = parse_auth_request()
            if errorResponse is not None:
                return errorResponse
            key = Key.from_hex(authRequest.key, 'key')
            op = Op.from_hex(authRequest.op, 'op')
            opc = milenage.generate_opc(key, op)
            return OpcResult(OPc=opc.hex()).model_dump(), 200
        except Exception as E:
            return handle_exception(E)


@ns_oam.route("/ping")
class PyAuC_OAM_Ping(Resource):
    def get(self):
        """Ping the API to check if it's alive"""
        return {"result": "OK"}, 200


if __name__ == '__main__':
    logTool.log(service='API', level='info', message=f"{banners.apiService()}")
    apiService.run(debug=config.get('api', {}).get('debug', False),
                   host=config.get('api', {}).get('bind_ip', '0.0.0.0'),
                   port=int(config.get('api', {}).get('bind_port', 8080)))
