#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""Manager for the database resources of the modules."""

import logging

from pydantic import SecretStr

from icingaweb2_modules.config.literals import DatabaseType
from icingaweb2_modules.config.models import Icingaweb2Context
from icingaweb2_modules.core.paths import ModulePaths
from icingaweb2_modules.core.resources import DatabaseResource, TlsDescriptor

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Builds database resources bound to a module."""

    def __init__(self, context: Icingaweb2Context, paths: ModulePaths):
        self.context = context
        self.paths = paths

    def resolve(
        self,
        name: str,
        db_type: DatabaseType,
        host: str | None,
        port: int | None,
        database: str | None,
        username: str | None,
        password: SecretStr | None,
        charset: str | None,
        tls: TlsDescriptor | None,
    ) -> DatabaseResource:
        """Builds the resource, defaulting the port from the engine."""
        if port is None:
            port = self.context.default_port(db_type.value)
        logger.debug(f"Database resource {name}: {db_type.value} on {host}:{port}/{database}")
        return DatabaseResource(
            name=name,
            target=self.paths.resources_file,
            db=db_type,
            host=host,
            port=port,
            dbname=database,
            username=username,
            password=password,
            charset=charset,
            tls=tls,
        )
