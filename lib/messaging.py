# Copyright 2023-2024 David Kneipp <david@davidkneipp.com>
# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
from redis import Redis
import json


class RedisMessaging:
    """
    PyAuC Redis Message Service
    A class for queueing log messages in redis for an external log consumer.
    """

    def __init__(self, host: str='localhost', port: int=6379, useUnixSocket: bool=False, unixSocketPath: str='/var/run/redis/redis-server.sock'):
        if useUnixSocket:
            self.redisClient = Redis(unix_socket_path=unixSocketPath)
        else:
            self.redisClient = Redis(host=host, port=port)

    def sendLogMessage(self, serviceName: str, logLevel: str, logTimestamp: float, message: str, logExpiry: int=None, usePrefix: bool=False, prefixHostname: str='unknown', prefixServiceName: str='common') -> str:
        """
        Stores a log message in the log queue, optionally prefixed with the hostname and service name.
        """
        try:
            logQueueName = "log"
            if usePrefix:
                logQueueName = f"{prefixHostname}:{prefixServiceName}:{logQueueName}"
            logMessage = json.dumps({"message": message, "service": serviceName, "level": logLevel, "timestamp": logTimestamp})
            self.redisClient.rpush(logQueueName, logMessage)
            if logExpiry is not None:
                self.redisClient.expire(logQueueName, logExpiry)
            return f'{message} stored in {logQueueName} successfully.'
        except Exception as e:
            return ''
