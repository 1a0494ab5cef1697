# Copyright 2025 sysmocom - s.f.m.c. GmbH <info@sysmocom.de>
# Copyright 2026 PyAuC contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import os
import sys
import yaml
from pathlib import Path

config = None

defaults = {
    "api": {
        "site_name": "",
        "bind_ip": "0.0.0.0",
        "bind_port": 8080,
        "debug": False,
    },
    "logging": {
        "level": "INFO",
        "logfiles": {},
    },
    "redis": {
        "enabled": False,
        "useUnixSocket": False,
        "unixSocketPath": "/var/run/redis/redis-server.sock",
        "host": "localhost",
        "port": 6379,
    },
}

logLevels = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ConfigError(Exception):
    """validate_config may raise this exception"""


def validate_config(loaded) -> dict:
    """
    Fills in missing api / logging / redis keys with defaults and checks the values PyAuC reads.
    Sections PyAuC does not know about are passed through untouched.
    """
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError("top level of the config must be a mapping")

    validated = dict(loaded)
    for section, sectionDefaults in defaults.items():
        value = loaded.get(section) or {}
        if not isinstance(value, dict):
            raise ConfigError(f"'{section}' must be a mapping")
        validated[section] = {**sectionDefaults, **value}

    for section, key in (("api", "bind_port"), ("redis", "port")):
        port = validated[section][key]
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
            raise ConfigError(f"{section}.{key} must be a port number, got {port!r}")

    level = validated["logging"]["level"]
    if not isinstance(level, str) or level.upper() not in logLevels:
        raise ConfigError(f"logging.level must be one of {', '.join(logLevels)}, got {level!r}")

    validated["logging"]["logfiles"] = validated["logging"]["logfiles"] or {}
    if not isinstance(validated["logging"]["logfiles"], dict):
        raise ConfigError("logging.logfiles must be a mapping")

    return validated


def load_config():
    global config

    if "PYAUC_CONFIG" in os.environ:
        paths = [os.environ["PYAUC_CONFIG"]]
        if not os.path.exists(paths[0]):
            print(f"ERROR: PYAUC_CONFIG is set, but file does not exist: {paths[0]}")
            sys.exit(1)
    else:
        paths = [
            "/etc/pyauc/config.yaml",
            "/usr/share/pyauc/config.yaml",
            Path(__file__).resolve().parent.parent / "config.yaml",
        ]

    for path in paths:
        if os.path.exists(path):
            with open(path, "r") as stream:
                try:
                    config = validate_config(yaml.safe_load(stream))
                except ConfigError as e:
                    print(f"ERROR: invalid PyAuC config {path}: {e}")
                    sys.exit(1)
            return

    print("ERROR: failed to find PyAuC config, tried these paths:")
    for path in paths:
        print(f" * {path}")
    sys.exit(1)


load_config()
