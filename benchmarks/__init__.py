"""
Benchmark suite for jsontree parsing and printing performance.

Compares jsontree against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Run explicitly with `pytest benchmarks`.
"""
