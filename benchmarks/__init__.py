"""Performance benchmarks for flashfd.

This package contains timing scripts for the hot path of the library, the
per-step marching loop of each difference scheme.
"""
