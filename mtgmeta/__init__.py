"""
MTGA Tool metadata builder
https://mtgatool.com/
MIT License
"""
