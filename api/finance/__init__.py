"""
Income and expense tracking.
"""
