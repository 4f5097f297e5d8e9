#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""Resource descriptors handed over to the orchestration engine.

Every descriptor is immutable. Secrets are kept as `SecretStr` so that they
are masked in reprs, logs and the JSON export, and only revealed when the INI
files are rendered.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, SecretStr, field_validator

from icingaweb2_modules.config.literals import DatabaseType, Ensure, InstallMethod
from icingaweb2_modules.utils.helpers import compact

SettingValue = str | int | bool | SecretStr


def ref(kind: str, name: str) -> str:
    """The reference other resources use to depend on a resource."""
    return f"{kind}:{name}"


class Resource(BaseModel):
    """Base class for all descriptors."""

    model_config = ConfigDict(frozen=True)


class TlsFile(Resource):
    """A TLS file which has to be written from inline content."""

    path: Path
    content: SecretStr
    mode: str


class TlsDescriptor(Resource):
    """The TLS part of a database resource."""

    key_file: Path | None = None
    cert_file: Path | None = None
    cacert_file: Path | None = None
    capath: Path | None = None
    noverify: bool = False
    cipher: str | None = None
    files: tuple[TlsFile, ...] = ()


class SettingsSection(Resource):
    """A named section of an INI file.

    Undefined values are dropped on creation, the rendered section never has
    empty keys.
    """

    name: str
    section_name: str
    target: Path
    settings: dict[str, SettingValue | None]

    @field_validator("settings", mode="after")
    @classmethod
    def drop_undefined(cls, value: dict[str, SettingValue | None]) -> dict[str, SettingValue]:
        """Removes the keys without a value."""
        return compact(value)

    @property
    def ref(self) -> str:
        """Reference to this section."""
        return ref("settings", self.name)


class DatabaseResource(Resource):
    """A database resource of Icinga Web 2, stored in resources.ini."""

    name: str
    target: Path
    type: str = "db"
    db: DatabaseType
    host: str | None = None
    port: int
    dbname: str | None = None
    username: str | None = None
    password: SecretStr | None = None
    charset: str | None = None
    tls: TlsDescriptor | None = None

    @property
    def ref(self) -> str:
        """Reference to this resource."""
        return ref("resource", self.name)

    def to_section(self) -> SettingsSection:
        """The resources.ini section describing this resource."""
        settings: dict[str, SettingValue | None] = {
            "type": self.type,
            "db": self.db.value,
            "host": self.host,
            "port": self.port,
            "dbname": self.dbname,
            "username": self.username,
            "password": self.password,
            "charset": self.charset,
        }
        if self.tls is not None:
            settings |= {
                "use_ssl": True,
                "ssl_key": str(self.tls.key_file) if self.tls.key_file else None,
                "ssl_cert": str(self.tls.cert_file) if self.tls.cert_file else None,
                "ssl_ca": str(self.tls.cacert_file) if self.tls.cacert_file else None,
                "ssl_capath": str(self.tls.capath) if self.tls.capath else None,
                "ssl_do_not_verify_server_cert": self.tls.noverify,
                "ssl_cipher": self.tls.cipher,
            }
        return SettingsSection(
            name=f"resource-{self.name}",
            section_name=self.name,
            target=self.target,
            settings=settings,
        )


class TriggerAction(Resource):
    """A command run once, after everything it requires is in place."""

    name: str
    command: str
    onlyif: str | None = None
    requires: tuple[str, ...] = ()

    @property
    def ref(self) -> str:
        """Reference to this action."""
        return ref("exec", self.name)


class ModuleResource(Resource):
    """An installed and enabled Icinga Web 2 module."""

    name: str
    ensure: Ensure
    install_method: InstallMethod
    package_name: str | None = None
    git_repository: str | None = None
    git_revision: str | None = None
    module_dir: Path
    enabled_link: Path
    settings: tuple[SettingsSection, ...] = ()

    @property
    def ref(self) -> str:
        """Reference to this module."""
        return ref("module", self.name)


class ModuleCatalog(Resource):
    """Everything a module resolves to in one pass."""

    module: ModuleResource
    database: DatabaseResource
    triggers: tuple[TriggerAction, ...] = ()

    @property
    def tls(self) -> TlsDescriptor | None:
        """The TLS descriptor of the module database, if TLS is in use."""
        return self.database.tls

    @property
    def sections(self) -> tuple[SettingsSection, ...]:
        """The settings of the module, followed by its database resource."""
        return self.module.settings + (self.database.to_section(),)

    def trigger(self, name: str) -> TriggerAction | None:
        """Returns the trigger with the given name, None when it is not declared."""
        return next((action for action in self.triggers if action.name == name), None)

    def resolution(
        self,
    ) -> tuple[
        DatabaseResource, TlsDescriptor | None, tuple[SettingsSection, ...], tuple[TriggerAction, ...]
    ]:
        """The catalog as a (database, tls, sections, triggers) tuple."""
        return self.database, self.tls, self.module.settings, self.triggers

    def to_json(self) -> str:
        """Deterministic export of the catalog, with secrets masked."""
        return self.model_dump_json(indent=2)
