"""
Quadra Pong: a four-paddle console Pong.
"""

__version__ = "0.1.0"
