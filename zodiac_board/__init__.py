"""
Zodiac cipher board: tile editing and transposition layouts for the Z340.
"""
