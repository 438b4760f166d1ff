# -*- coding: utf-8 -*-
"""Per-cell statistics that can be attached to partition layers."""
