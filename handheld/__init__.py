"""
handheld: boot-code execution, loop detection and repair for the handheld
game console, plus the puzzle runner around it.
"""

__version__ = "0.1.0"
