#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""Operator for the monitoring module."""

import logging

from typing_extensions import override

from icingaweb2_modules.config.literals import ModuleName, TransportType
from icingaweb2_modules.core.operator import ModuleOperator
from icingaweb2_modules.core.resources import (
    DatabaseResource,
    SettingsSection,
    SettingValue,
    TlsDescriptor,
)
from icingaweb2_modules.core.structured_config import (
    CommandTransportParameters,
    MonitoringParameters,
)
from icingaweb2_modules.utils.helpers import join_patterns

logger = logging.getLogger(__name__)


class MonitoringOperator(ModuleOperator[MonitoringParameters]):
    """Resolves the monitoring module, reading the Icinga 2 IDO database."""

    name = ModuleName.MONITORING

    @override
    def database_resource(self, tls: TlsDescriptor | None) -> DatabaseResource:
        return self.database_manager.resolve(
            self.resource_name,
            db_type=self.params.ido_type,
            host=self.params.ido_host,
            port=self.params.ido_port,
            database=self.params.ido_db_name,
            username=self.params.ido_db_username,
            password=self.params.ido_db_password,
            charset=self.params.ido_db_charset,
            tls=tls,
        )

    @property
    def backends_section(self) -> SettingsSection:
        """The IDO backend bound to the module database resource."""
        return SettingsSection(
            name="module-monitoring-backends",
            section_name="backends",
            target=self.paths.backends_file,
            settings={"type": "ido", "resource": self.resource_name},
        )

    @property
    def security_section(self) -> SettingsSection:
        """Custom variables hidden from the users."""
        return SettingsSection(
            name="module-monitoring-security",
            section_name="security",
            target=self.paths.config_file,
            settings={"protected_customvars": join_patterns(self.params.protected_customvars)},
        )

    def commandtransport_section(
        self, name: str, transport: CommandTransportParameters
    ) -> SettingsSection:
        """A command transport, talking either to the API or to the local command pipe."""
        settings: dict[str, SettingValue | None]
        match transport.transport:
            case TransportType.API:
                settings = {
                    "transport": transport.transport.value,
                    "host": transport.host,
                    "port": str(transport.port),
                    "username": transport.username,
                    "password": transport.password,
                }
            case TransportType.LOCAL:
                settings = {
                    "transport": transport.transport.value,
                    "path": str(transport.path),
                }
        logger.debug(f"Command transport {name}: {transport.transport.value}")
        return SettingsSection(
            name=f"monitoring-commandtransport-{name}",
            section_name=name,
            target=self.paths.commandtransports_file,
            settings=settings,
        )

    @override
    def settings(self) -> list[SettingsSection]:
        return [
            self.backends_section,
            self.security_section,
            *(
                self.commandtransport_section(name, transport)
                for name, transport in self.params.commandtransports.items()
            ),
        ]
