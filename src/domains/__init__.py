# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain layer for the École Nid Douillet backend.

This package contains the pure business rules of the school calendar.

Domains:
    academic_year: Academic year windows, labels and enrollment periods.
    class_level: Age computation, class placement and localized labels.
"""
