"""
To-do tasks.
"""
