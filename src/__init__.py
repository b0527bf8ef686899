"""École Nid Douillet Backend.

Academic calendar and age-based class placement for a bilingual
(French/Arabic) kindergarten.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
