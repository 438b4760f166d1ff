# -*- coding: utf-8 -*-
"""The core package holds the fundamental data structures and the partitioning algorithm of nestedgrid.

It defines rectangles and cells, the partition they form, the adaptive partitioner itself and the layers results are kept in.
"""
