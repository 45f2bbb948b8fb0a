"""Linked lists, hash tables, B-trees, binary search trees and weighted graphs in plain Python."""

__version__ = "0.1.0"