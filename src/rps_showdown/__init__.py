"""
剪刀石头布对决
RPS Showdown
"""
__version__ = "0.1.0"
