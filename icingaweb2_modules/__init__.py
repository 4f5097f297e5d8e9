# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.
"""Desired state resolution for Icinga Web 2 modules.

Each module operator turns a validated set of parameters and an explicit
`Icingaweb2Context` into a `ModuleCatalog`: the module resource, its database
resource, the INI settings to render and the one-time trigger actions an
orchestration engine has to run.
"""

from icingaweb2_modules.config.models import Icingaweb2Context
from icingaweb2_modules.core.resources import ModuleCatalog
from icingaweb2_modules.core.structured_config import (
    DirectorParameters,
    ModuleParameters,
    MonitoringParameters,
)
from icingaweb2_modules.managers.director import DirectorOperator
from icingaweb2_modules.managers.monitoring import MonitoringOperator


def resolve(params: ModuleParameters, context: Icingaweb2Context | None) -> ModuleCatalog:
    """Resolves the catalog of the module the parameters belong to."""
    match params:
        case DirectorParameters():
            return DirectorOperator(params, context).resolve()
        case MonitoringParameters():
            return MonitoringOperator(params, context).resolve()
        case _:
            raise TypeError(f"no operator for {type(params).__name__}")


__all__ = ["DirectorOperator", "MonitoringOperator", "resolve"]
