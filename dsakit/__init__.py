"""Classic algorithms and data structures: numbers, searching, sorting, text,
patterns, backtracking, hash maps, dynamic arrays, fractions, polynomials,
priority queues and trees."""

__version__ = "0.1.0"