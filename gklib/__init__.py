"""Algorithmic building blocks: quicksort, priority queues, vector helpers, a 64-bit Mersenne Twister, PageRank, tokenizing, string, PSSM and timing utilities."""

__version__ = "5.2.0"