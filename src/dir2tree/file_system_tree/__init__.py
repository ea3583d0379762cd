"""File system tree representation with configurable depth and ignore rules.

This module provides classes for walking a directory, building a tree of the entries
that survive the ignore rules, and rendering that tree with box-drawing connectors.
"""
