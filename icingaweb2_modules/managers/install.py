#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""Selection of the install method of a module."""

import logging

from icingaweb2_modules.config.literals import (
    OS_INSTALL_METHODS,
    PACKAGE_NAME_TEMPLATE,
    InstallMethod,
)

logger = logging.getLogger(__name__)


def select_install_method(
    os_family: str,
    manage_package: bool,
    explicit_method: InstallMethod | None = None,
    module: str = "",
    package_name: str | None = None,
) -> tuple[InstallMethod, str | None]:
    """Chooses how a module gets installed.

    Args:
        os_family: the OS family of the host, as reported by facter
        manage_package: whether the module should be installed at all
        explicit_method: an install method which overrides the OS family table
        module: the module name, used to build the default package name
        package_name: overrides the default package name

    Returns:
        The install method and the package name, which is only set for the
        package method.
    """
    if not manage_package:
        logger.debug(f"Package management disabled for module '{module}'")
        return InstallMethod.NONE, None

    method = explicit_method or OS_INSTALL_METHODS.get(os_family, InstallMethod.NONE)
    logger.debug(f"Install method for module '{module}' on {os_family}: {method.value}")
    if method != InstallMethod.PACKAGE:
        return method, None
    return method, package_name or PACKAGE_NAME_TEMPLATE.format(module=module)
