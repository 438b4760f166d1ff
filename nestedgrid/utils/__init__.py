# -*- coding: utf-8 -*-
"""Utility helpers: sample data and layer summaries."""
