"""
passcraft
Secure password generation and strength scoring.
"""

__version__ = "1.0.0"
