"""
Firebase token creator: CLI and web page for minting test ID tokens.
"""

__version__ = "0.1.0"
