"""
Calendar events.
"""
