#!/usr/bin/python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""Abstract Operator for Icinga Web 2 modules.

The module operator defines the minimal interface that should be specified
when defining a module. Every module has a database resource (possibly using
TLS), some INI settings, and is installed and enabled the same way.

To that, each operator can add trigger actions which are specific to this
module, like the director schema migration.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from icingaweb2_modules.config.literals import (
    GIT_REPOSITORY_TEMPLATE,
    RESOURCE_NAME_TEMPLATE,
    Ensure,
    InstallMethod,
    ModuleName,
)
from icingaweb2_modules.config.models import Icingaweb2Context
from icingaweb2_modules.core.paths import ModulePaths
from icingaweb2_modules.core.resources import (
    DatabaseResource,
    ModuleCatalog,
    ModuleResource,
    SettingsSection,
    TlsDescriptor,
    TriggerAction,
)
from icingaweb2_modules.core.structured_config import ModuleParameters
from icingaweb2_modules.exceptions import MissingDependencyError
from icingaweb2_modules.managers.database import DatabaseManager
from icingaweb2_modules.managers.install import select_install_method
from icingaweb2_modules.managers.tls import TLSManager

P = TypeVar("P", bound=ModuleParameters)

logger = logging.getLogger(__name__)


class ModuleOperator(ABC, Generic[P]):
    """Protocol for a module operator.

    A module operator must define the following elements:
     * name: The module name, which is one value of the `ModuleName` enum.
     * database_resource: How the module database resource is built.
     * settings: The INI sections of the module.
    """

    name: ClassVar[ModuleName]

    def __init__(self, params: P, context: Icingaweb2Context | None):
        if context is None:
            raise MissingDependencyError(self.name.value, "icingaweb2")
        self.params = params
        self.context = context
        self.paths = ModulePaths(context, self.name.value, params.module_dir)
        self.tls_manager = TLSManager(context, self.paths)
        self.database_manager = DatabaseManager(context, self.paths)

    @property
    def resource_name(self) -> str:
        """The name of the module database resource."""
        return RESOURCE_NAME_TEMPLATE.format(module=self.name.value)

    @abstractmethod
    def database_resource(self, tls: TlsDescriptor | None) -> DatabaseResource:
        """Builds the database resource of the module."""
        ...

    @abstractmethod
    def settings(self) -> list[SettingsSection]:
        """Builds the settings sections of the module."""
        ...

    def triggers(
        self, module: ModuleResource, database: DatabaseResource
    ) -> list[TriggerAction]:
        """The one-time actions of the module, none by default."""
        return []

    def module_resource(self, settings: tuple[SettingsSection, ...]) -> ModuleResource:
        """Builds the module resource, selecting its install method."""
        explicit = self.params.install_method
        if explicit is None and self.params.git_revision is not None:
            explicit = InstallMethod.GIT

        method, package_name = select_install_method(
            self.context.os_family,
            self.params.manage_package,
            explicit,
            module=self.name.value,
            package_name=self.params.package_name,
        )
        git_repository = git_revision = None
        if method == InstallMethod.GIT:
            git_repository = self.params.git_repository or GIT_REPOSITORY_TEMPLATE.format(
                module=self.name.value
            )
            git_revision = self.params.git_revision

        return ModuleResource(
            name=self.name.value,
            ensure=self.params.ensure,
            install_method=method,
            package_name=package_name,
            git_repository=git_repository,
            git_revision=git_revision,
            module_dir=self.paths.module_dir,
            enabled_link=self.paths.enabled_link,
            settings=settings,
        )

    def resolve(self) -> ModuleCatalog:
        """Resolves the whole catalog of the module.

        Any invalid input raises before anything is returned.
        """
        logger.debug(f"Resolving module {self.name.value}")
        tls = self.tls_manager.resolve(self.resource_name, self.params)
        database = self.database_resource(tls)
        module = self.module_resource(tuple(self.settings()))

        triggers: list[TriggerAction] = []
        if self.params.ensure == Ensure.PRESENT:
            triggers = self.triggers(module, database)
        for action in triggers:
            logger.info(f"Module {self.name.value} declares {action.name}")

        return ModuleCatalog(module=module, database=database, triggers=tuple(triggers))
