# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
pacta_charts test suite.

Unit tests for validation, data preparation, band layout and chart
assembly, organized to mirror the package layout.
"""
