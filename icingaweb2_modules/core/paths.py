#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""Paths of an Icinga Web 2 module."""

from pathlib import Path

from icingaweb2_modules.config.models import Icingaweb2Context


class ModulePaths:
    """Object to store the common paths for an Icinga Web 2 module."""

    def __init__(self, context: Icingaweb2Context, module: str, module_dir: Path | None = None):
        self.module = module
        self.conf_path = context.conf_dir
        self.cert_path = context.cert_dir
        self.module_dir = module_dir or context.module_path / module

    @property
    def config_dir(self) -> Path:
        """The directory holding the module configuration."""
        return self.conf_path / "modules" / self.module

    @property
    def config_file(self) -> Path:
        """The main module config file."""
        return self.config_dir / "config.ini"

    @property
    def kickstart_file(self) -> Path:
        """The director kickstart settings."""
        return self.config_dir / "kickstart.ini"

    @property
    def backends_file(self) -> Path:
        """The monitoring backends."""
        return self.config_dir / "backends.ini"

    @property
    def commandtransports_file(self) -> Path:
        """The monitoring command transports."""
        return self.config_dir / "commandtransports.ini"

    @property
    def resources_file(self) -> Path:
        """The Icinga Web 2 resources, shared by all modules."""
        return self.conf_path / "resources.ini"

    @property
    def enabled_link(self) -> Path:
        """The symlink enabling the module."""
        return self.conf_path / "enabledModules" / self.module

    def key_file(self, resource: str) -> Path:
        """Default location of an inline TLS key."""
        return self.cert_path / f"{resource}.key"

    def cert_file(self, resource: str) -> Path:
        """Default location of an inline TLS certificate."""
        return self.cert_path / f"{resource}.crt"

    def cacert_file(self, resource: str) -> Path:
        """Default location of an inline TLS CA certificate."""
        return self.cert_path / f"{resource}_ca.crt"
