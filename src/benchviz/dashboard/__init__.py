"""
benchviz dashboard: a read-only JSON API over the benchmark data.
"""
