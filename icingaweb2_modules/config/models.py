#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.
"""The Icinga Web 2 base configuration passed to every operator."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dacite import Config, from_dict

from icingaweb2_modules.config.literals import (
    CERT_DIR,
    CONF_DIR,
    DEBIAN_FAMILY,
    DEFAULT_DB_PORTS,
    ICINGACLI_BIN,
    MODULE_PATH,
    DatabaseType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TLSDefaults:
    """TLS values applied when a module enables TLS without setting them."""

    noverify: bool = False
    cipher: str | None = None


@dataclass(frozen=True)
class Icingaweb2Context:
    """The base Icinga Web 2 installation modules are declared against.

    Replaces any process-wide lookup: resolution only ever reads what is in
    this object, which keeps operators pure.
    """

    os_family: str = DEBIAN_FAMILY
    conf_dir: Path = CONF_DIR
    module_path: Path = MODULE_PATH
    cert_dir: Path = CERT_DIR
    icingacli_bin: Path = ICINGACLI_BIN
    db_ports: dict[str, int] = field(
        default_factory=lambda: {db_type.value: port for db_type, port in DEFAULT_DB_PORTS.items()}
    )
    tls: TLSDefaults = field(default_factory=TLSDefaults)

    def default_port(self, db_type: str) -> int:
        """The default port for the given database engine.

        A table loaded from a file may only override some engines, the others
        keep their stock port.
        """
        if db_type in self.db_ports:
            return self.db_ports[db_type]
        return DEFAULT_DB_PORTS[DatabaseType(db_type)]


def load_context(path: Path) -> Icingaweb2Context:
    """Builds the context from a YAML file.

    Keys missing in the file keep their defaults, unknown keys are rejected.
    """
    data = yaml.safe_load(path.read_text()) or {}
    logger.debug(f"Loading Icinga Web 2 context from {path}")
    return from_dict(
        data_class=Icingaweb2Context,
        data=data,
        config=Config(type_hooks={Path: Path}, strict=True),
    )
