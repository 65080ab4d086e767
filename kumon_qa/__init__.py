"""
Kumon QA - procedural math worksheet generation and automated QA.

Generates Kumon-style math problems by level and worksheet number from a
single canonical curriculum table, then runs batches of generated problems
through pluggable validators and can mechanically patch source files for
the defects it finds.
"""

__version__ = "1.0.0"
