"""
Scenes package for Quadra Pong.
"""
