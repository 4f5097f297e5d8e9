# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.
"""Literals and static configuration for Icinga Web 2 modules."""
