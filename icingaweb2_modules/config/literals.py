# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.
"""Literal string for the different modules.

This module should contain the literals used by the operators (paths, enums, etc).
"""

from enum import Enum
from pathlib import Path

LOCALHOST = "localhost"


class Ensure(str, Enum):
    """Whether a module should be present on the host."""

    PRESENT = "present"
    ABSENT = "absent"


class ModuleName(str, Enum):
    """The modules handled by this library."""

    DIRECTOR = "director"
    MONITORING = "monitoring"


class DatabaseType(str, Enum):
    """The two supported database engines."""

    MYSQL = "mysql"
    PGSQL = "pgsql"


class DatabasePorts(int, Enum):
    """The default database ports."""

    MYSQL = 3306
    PGSQL = 5432


class InstallMethod(str, Enum):
    """The possible ways of getting a module on disk."""

    GIT = "git"
    PACKAGE = "package"
    NONE = "none"


class TransportType(str, Enum):
    """How the monitoring module sends commands to Icinga 2."""

    API = "api"
    LOCAL = "local"


class ConflictPolicy(str, Enum):
    """What to do when two settings groups write the same key."""

    FAIL = "fail"
    LAST_WRITER_WINS = "last-writer-wins"


DEFAULT_DB_PORTS: dict[DatabaseType, int] = {
    DatabaseType.MYSQL: DatabasePorts.MYSQL.value,
    DatabaseType.PGSQL: DatabasePorts.PGSQL.value,
}

# OS families as reported by facter. Only Debian ships the modules as
# distribution packages, any other family is left unmanaged.
DEBIAN_FAMILY = "Debian"
OS_INSTALL_METHODS: dict[str, InstallMethod] = {
    DEBIAN_FAMILY: InstallMethod.PACKAGE,
}

PACKAGE_NAME_TEMPLATE = "icingaweb2-module-{module}"
GIT_REPOSITORY_TEMPLATE = "https://github.com/Icinga/icingaweb2-module-{module}.git"
RESOURCE_NAME_TEMPLATE = "icingaweb2-module-{module}"

ICINGA_API_PORT = 5665
ICINGA_COMMAND_PIPE = Path("/var/run/icinga2/cmd/icinga2.cmd")
DIRECTOR_DB_CHARSET = "utf8"
DEFAULT_PROTECTED_CUSTOMVARS = ["*pw*", "*pass*", "community"]

CONF_DIR = Path("/etc/icingaweb2")
MODULE_PATH = Path("/usr/share/icingaweb2/modules")
CERT_DIR = Path("/var/lib/icingaweb2/certs")
ICINGACLI_BIN = Path("/usr/bin/icingacli")
