#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""Operator for the director module.

The director keeps its configuration in its own database. On top of the
common module resources, it may declare two one-time actions:
 * director-migration: imports or upgrades the database schema.
 * director-kickstart: imports the Icinga 2 endpoint configuration through the API,
   which only works on a migrated schema.
"""

from typing_extensions import override

from icingaweb2_modules.config.literals import ModuleName
from icingaweb2_modules.core.operator import ModuleOperator
from icingaweb2_modules.core.resources import (
    DatabaseResource,
    ModuleResource,
    SettingsSection,
    TlsDescriptor,
    TriggerAction,
)
from icingaweb2_modules.core.structured_config import DirectorParameters

MIGRATION = "director-migration"
KICKSTART = "director-kickstart"


class DirectorOperator(ModuleOperator[DirectorParameters]):
    """Resolves the director module."""

    name = ModuleName.DIRECTOR

    @override
    def database_resource(self, tls: TlsDescriptor | None) -> DatabaseResource:
        return self.database_manager.resolve(
            self.resource_name,
            db_type=self.params.db_type,
            host=self.params.db_host,
            port=self.params.db_port,
            database=self.params.db_name,
            username=self.params.db_username,
            password=self.params.db_password,
            charset=self.params.db_charset,
            tls=tls,
        )

    @property
    def db_section(self) -> SettingsSection:
        """Binds the director to its database resource."""
        return SettingsSection(
            name="module-director-db",
            section_name="db",
            target=self.paths.config_file,
            settings={"resource": self.resource_name},
        )

    @property
    def kickstart_section(self) -> SettingsSection | None:
        """The API endpoint used by the kickstart, only when kickstart is requested."""
        if not self.params.kickstart:
            return None
        return SettingsSection(
            name="module-director-config",
            section_name="config",
            target=self.paths.kickstart_file,
            settings={
                "endpoint": self.params.endpoint,
                "host": self.params.api_host,
                "port": str(self.params.api_port),
                "username": self.params.api_username,
                "password": self.params.api_password,
            },
        )

    @override
    def settings(self) -> list[SettingsSection]:
        sections = [self.db_section]
        if kickstart := self.kickstart_section:
            sections.append(kickstart)
        return sections

    def icingacli(self, *args: str) -> str:
        """Builds an icingacli director command line."""
        return " ".join([str(self.context.icingacli_bin), "director", *args])

    @override
    def triggers(
        self, module: ModuleResource, database: DatabaseResource
    ) -> list[TriggerAction]:
        settings = {section.section_name: section for section in module.settings}
        actions: list[TriggerAction] = []

        migration: TriggerAction | None = None
        if self.params.import_schema:
            migration = TriggerAction(
                name=MIGRATION,
                command=self.icingacli("migration", "run"),
                onlyif=self.icingacli("migration", "pending"),
                requires=(module.ref, settings["db"].ref, database.ref),
            )
            actions.append(migration)

        if self.params.kickstart:
            requires = [module.ref, settings["db"].ref, database.ref, settings["config"].ref]
            if migration is not None:
                requires.append(migration.ref)
            actions.append(
                TriggerAction(
                    name=KICKSTART,
                    command=self.icingacli("kickstart", "run"),
                    onlyif=self.icingacli("kickstart", "required"),
                    requires=tuple(requires),
                )
            )
        return actions
