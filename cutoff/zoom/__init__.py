"""
Zoom window selection for the initial chart range.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from cutoff.zoom.window import ZoomWindow, compute_zoom_window

__all__ = ["ZoomWindow", "compute_zoom_window"]
