# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.
from pathlib import Path

from parameterized import parameterized

from icingaweb2_modules.config.models import Icingaweb2Context
from icingaweb2_modules.core.paths import ModulePaths


@parameterized.expand([[Icingaweb2Context()], [Icingaweb2Context(conf_dir=Path("/usr/local/etc/icingaweb2"))]])
def test_module_paths(context: Icingaweb2Context):
    paths = ModulePaths(context, "monitoring")

    assert paths.module_dir == context.module_path / "monitoring"
    assert paths.config_dir == context.conf_dir / "modules" / "monitoring"
    assert paths.config_file.parent == paths.config_dir
    assert paths.kickstart_file.parent == paths.config_dir
    assert paths.backends_file.parent == paths.config_dir
    assert paths.commandtransports_file.parent == paths.config_dir
    assert paths.resources_file == context.conf_dir / "resources.ini"
    assert paths.enabled_link == context.conf_dir / "enabledModules" / "monitoring"

    assert all(
        path.parent == context.cert_dir
        for path in (paths.key_file("r"), paths.cert_file("r"), paths.cacert_file("r"))
    )


def test_module_paths_custom_module_dir():
    paths = ModulePaths(Icingaweb2Context(), "director", Path("/opt/director"))

    assert paths.module_dir == Path("/opt/director")
