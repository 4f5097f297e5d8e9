# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.
from pathlib import Path

import pytest
from parameterized import parameterized
from pydantic import ValidationError

from icingaweb2_modules import resolve
from icingaweb2_modules.config.literals import DatabaseType
from icingaweb2_modules.config.models import Icingaweb2Context
from icingaweb2_modules.managers.monitoring import MonitoringOperator
from icingaweb2_modules.managers.settings import render_catalogs

from .helpers import DirectorParametersFactory, MonitoringParametersFactory


def security(catalog) -> dict:
    section = next(s for s in catalog.module.settings if s.section_name == "security")
    assert section.target == Path("/etc/icingaweb2/modules/monitoring/config.ini")
    return section.settings


def test_monitoring_backends(context: Icingaweb2Context):
    catalog = MonitoringOperator(MonitoringParametersFactory(), context).resolve()

    section = next(s for s in catalog.module.settings if s.section_name == "backends")
    assert section.name == "module-monitoring-backends"
    assert section.target == Path("/etc/icingaweb2/modules/monitoring/backends.ini")
    assert section.settings == {"type": "ido", "resource": "icingaweb2-module-monitoring"}
    assert catalog.triggers == ()


def test_protected_customvars_sequence(context: Icingaweb2Context):
    params = MonitoringParametersFactory(protected_customvars=["*pw*", "*pass*"])
    catalog = MonitoringOperator(params, context).resolve()

    assert security(catalog) == {"protected_customvars": "*pw*,*pass*"}


def test_protected_customvars_string(context: Icingaweb2Context):
    params = MonitoringParametersFactory(protected_customvars="community")
    catalog = MonitoringOperator(params, context).resolve()

    assert security(catalog) == {"protected_customvars": "community"}


def test_protected_customvars_default(context: Icingaweb2Context):
    catalog = MonitoringOperator(MonitoringParametersFactory(), context).resolve()

    assert security(catalog) == {"protected_customvars": "*pw*,*pass*,community"}


@parameterized.expand(
    [
        [DatabaseType.MYSQL, None, 3306],
        [DatabaseType.PGSQL, None, 5432],
        [DatabaseType.PGSQL, 6432, 6432],
    ]
)
def test_ido_port(ido_type: DatabaseType, ido_port: int | None, expected: int):
    params = MonitoringParametersFactory(ido_type=ido_type, ido_port=ido_port)
    catalog = MonitoringOperator(params, Icingaweb2Context()).resolve()

    assert catalog.database.db == ido_type
    assert catalog.database.port == expected


def test_ido_port_from_context():
    context = Icingaweb2Context(db_ports={"mysql": 3307, "pgsql": 5433})
    catalog = MonitoringOperator(MonitoringParametersFactory(), context).resolve()

    assert catalog.database.port == 3307


def test_ido_port_from_partial_context():
    context = Icingaweb2Context(db_ports={"mysql": 3307})
    params = MonitoringParametersFactory(ido_type=DatabaseType.PGSQL)
    catalog = MonitoringOperator(params, context).resolve()

    assert catalog.database.port == 5432


def test_ido_charset_omitted_when_undefined(context: Icingaweb2Context):
    catalog = MonitoringOperator(MonitoringParametersFactory(), context).resolve()

    section = catalog.database.to_section()
    assert "charset" not in section.settings
    assert None not in section.settings.values()


@parameterized.expand(
    [
        [{"ido_type": "oracle"}],
        [{"ido_port": 0}],
        [{"ido_port": 70000}],
        [{"ido_port": "not-a-port"}],
        [{"ido_host": "bad host!"}],
        [{"ido_host": "-leading.example.com"}],
        [{"module_dir": "relative/path"}],
        [{"commandtransports": {"bad]name": {}}}],
        [{"unknown_option": True}],
    ]
)
def test_invalid_parameters(params: dict):
    with pytest.raises(ValidationError):
        MonitoringParametersFactory(**params)


def test_validation_errors_hide_passwords():
    with pytest.raises(ValidationError) as excinfo:
        MonitoringParametersFactory(ido_db_password="hunter2", ido_port=-1)
    assert "hunter2" not in str(excinfo.value)


def test_commandtransports(context: Icingaweb2Context):
    params = MonitoringParametersFactory(
        commandtransports={
            "icinga2": {
                "transport": "api",
                "host": "icinga.example.com",
                "username": "icingaweb2",
                "password": "transport-secret",
            },
            "pipe": {"transport": "local"},
        }
    )
    catalog = MonitoringOperator(params, context).resolve()
    files = render_catalogs(catalog)

    assert files[Path("/etc/icingaweb2/modules/monitoring/commandtransports.ini")] == (
        "[icinga2]\n"
        'transport = "api"\n'
        'host = "icinga.example.com"\n'
        'port = "5665"\n'
        'username = "icingaweb2"\n'
        'password = "transport-secret"\n'
        "\n"
        "[pipe]\n"
        'transport = "local"\n'
        'path = "/var/run/icinga2/cmd/icinga2.cmd"\n'
    )


def test_commandtransport_without_credentials(context: Icingaweb2Context):
    params = MonitoringParametersFactory(commandtransports={"icinga2": {}})
    catalog = MonitoringOperator(params, context).resolve()

    section = next(s for s in catalog.module.settings if s.section_name == "icinga2")
    assert section.settings == {"transport": "api", "host": "localhost", "port": "5665"}


def test_monitoring_and_director_share_resources(context: Icingaweb2Context):
    monitoring = resolve(MonitoringParametersFactory(), context)
    director = resolve(DirectorParametersFactory(), context)
    files = render_catalogs(monitoring, director)

    resources = files[Path("/etc/icingaweb2/resources.ini")]
    assert "[icingaweb2-module-monitoring]" in resources
    assert "[icingaweb2-module-director]" in resources
    assert resources.index("[icingaweb2-module-monitoring]") < resources.index(
        "[icingaweb2-module-director]"
    )
