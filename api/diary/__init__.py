"""
Homework diary.
"""
