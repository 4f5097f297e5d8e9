# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.
"""Managers resolving each part of a module catalog."""
