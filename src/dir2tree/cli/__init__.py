"""Command-line front-end for dir2tree."""
