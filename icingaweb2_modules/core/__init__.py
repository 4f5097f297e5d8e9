# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.
"""Core models shared by all module operators."""
