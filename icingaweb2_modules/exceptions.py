#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""All general exceptions."""


class MissingDependencyError(Exception):
    """Raised when a module is resolved without its Icinga Web 2 base configuration."""

    def __init__(self, module: str, dependency: str):
        super().__init__(self)
        self.module = module
        self.dependency = dependency

    def __str__(self) -> str:
        """Repr of error."""
        return f"module '{self.module}' requires '{self.dependency}' to be declared first"


class ConflictingSettingError(Exception):
    """Raised when two settings groups assign different values to the same key."""

    def __init__(self, target: str, section: str, key: str):
        super().__init__(self)
        self.target = target
        self.section = section
        self.key = key

    def __str__(self) -> str:
        """Repr of error."""
        return f"conflicting values for '{self.key}' in [{self.section}] of {self.target}"


class InvalidTLSMaterialError(Exception):
    """Raised when inline TLS content is neither a valid PEM nor a base64 encoded PEM."""
