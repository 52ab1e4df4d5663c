# SPDX-License-Identifier: MIT
"""CLI commands for segver."""
