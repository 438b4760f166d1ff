# -*- coding: utf-8 -*-
"""The io package converts between geopandas point/polygon frames and the partitioner's arrays.

File formats are handled by geopandas directly.
"""
