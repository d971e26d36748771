"""colors_checker.core — Foundation layer.

Contains the Color value type and its arithmetic, the contrast matrix,
the colour file parser, settings loading and the report builder.
This module has NO dependencies on colors_checker.commands or colors_checker.registry.
Only stdlib and numpy are allowed here.
"""
