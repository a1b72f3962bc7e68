# Premium Estimator - Car Insurance Cost Estimation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Car insurance premium estimator.

Rates a driver's age, state, vehicle type and coverage level into an annual
and monthly premium with a coverage breakdown.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
