# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Core package for the École Nid Douillet backend.

This package contains shared infrastructure used by every domain:
- config: Application configuration and settings
- exceptions: Academic calendar error hierarchy
"""
