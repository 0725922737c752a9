"""Algorithms and data structures for competitive programming: modular
arithmetic, sieves, NTT, Fenwick and segment trees, disjoint sets, sparse
tables, graph helpers, tries, string matching and hashing."""

__version__ = "0.1.0"