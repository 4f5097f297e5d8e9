#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""Structured parameters for the Icinga Web 2 modules."""

from pathlib import Path
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    StringConstraints,
    model_validator,
)

from icingaweb2_modules.config.literals import (
    DEFAULT_PROTECTED_CUSTOMVARS,
    DIRECTOR_DB_CHARSET,
    ICINGA_API_PORT,
    ICINGA_COMMAND_PIPE,
    LOCALHOST,
    DatabaseType,
    Ensure,
    InstallMethod,
    TransportType,
)
from icingaweb2_modules.utils.helpers import validate_absolute_path, validate_host

Host = Annotated[str, AfterValidator(validate_host)]
Port = Annotated[int, Field(ge=1, le=65535)]
AbsolutePath = Annotated[Path, AfterValidator(validate_absolute_path)]
# Transport names become INI section headers.
TransportName = Annotated[str, StringConstraints(pattern=r"^[A-Za-z0-9_.-]+$")]


class BaseConfigModel(BaseModel):
    """Class to be used for defining the structured parameters.

    Inputs never appear in validation errors since they may carry passwords.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", hide_input_in_errors=True)


class TLSParameters(BaseConfigModel):
    """TLS options of a database connection.

    `tls_key`, `tls_cert` and `tls_cacert` hold inline content (PEM or base64
    encoded PEM) which gets written to disk. The `*_file` and `tls_capath`
    options point at files which already exist.
    """

    use_tls: bool | None = None
    tls_key_file: AbsolutePath | None = None
    tls_cert_file: AbsolutePath | None = None
    tls_cacert_file: AbsolutePath | None = None
    tls_key: SecretStr | None = None
    tls_cert: str | None = None
    tls_cacert: str | None = None
    tls_capath: AbsolutePath | None = None
    tls_noverify: bool | None = None
    tls_cipher: str | None = None


class InstallParameters(BaseConfigModel):
    """How the module gets on disk."""

    ensure: Ensure = Ensure.PRESENT
    manage_package: bool = True
    install_method: InstallMethod | None = None
    git_repository: str | None = None
    git_revision: str | None = None
    package_name: str | None = None
    module_dir: AbsolutePath | None = None


class ModuleParameters(InstallParameters, TLSParameters):
    """Parameters common to every module."""


class DirectorParameters(ModuleParameters):
    """The parameters of the director module."""

    db_type: DatabaseType = DatabaseType.MYSQL
    db_host: Host | None = None
    db_port: Port | None = None
    db_name: str | None = None
    db_username: str | None = None
    db_password: SecretStr | None = None
    db_charset: str = DIRECTOR_DB_CHARSET
    import_schema: bool = False
    kickstart: bool = False
    endpoint: str | None = None
    api_host: Host = LOCALHOST
    api_port: Port = ICINGA_API_PORT
    api_username: str | None = None
    api_password: SecretStr | None = None

    @model_validator(mode="after")
    def check_kickstart(self) -> "DirectorParameters":
        """Kickstart talks to the Icinga 2 API and needs an endpoint and credentials."""
        if not self.kickstart:
            return self
        missing = [
            name
            for name in ("endpoint", "api_username", "api_password")
            if getattr(self, name) is None
        ]
        if missing:
            raise ValueError(f"kickstart requires {', '.join(missing)}")
        return self


class CommandTransportParameters(BaseConfigModel):
    """A command transport of the monitoring module."""

    transport: TransportType = TransportType.API
    host: Host = LOCALHOST
    port: Port = ICINGA_API_PORT
    username: str | None = None
    password: SecretStr | None = None
    path: AbsolutePath = ICINGA_COMMAND_PIPE


class MonitoringParameters(ModuleParameters):
    """The parameters of the monitoring module."""

    ido_type: DatabaseType = DatabaseType.MYSQL
    ido_host: Host | None = None
    ido_port: Port | None = None
    ido_db_name: str | None = None
    ido_db_username: str | None = None
    ido_db_password: SecretStr | None = None
    ido_db_charset: str | None = None
    protected_customvars: tuple[str, ...] | str = Field(
        default_factory=lambda: tuple(DEFAULT_PROTECTED_CUSTOMVARS)
    )
    commandtransports: dict[TransportName, CommandTransportParameters] = Field(
        default_factory=dict
    )
