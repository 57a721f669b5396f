"""Classic algorithms, data structures, a simulated allocator and threading patterns."""

__version__ = "0.1.0"