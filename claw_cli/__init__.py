"""
Claw CLI

Command-line tools for inspecting workspace skills.
"""

__version__ = "0.1.0"
