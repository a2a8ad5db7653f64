"""
PyGame platform layer for Classic Pong
"""
