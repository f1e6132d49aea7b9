"""
Weekly delta computations for faction and cross-faction score buckets.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from cutoff.weekly.delta import WeeklyDelta, compute_weekly_delta
from cutoff.weekly.gains import WeekBand, season_week_count, weekly_gains

__all__ = ["WeeklyDelta", "compute_weekly_delta", "WeekBand", "season_week_count", "weekly_gains"]
