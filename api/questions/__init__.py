"""
Spaced-repetition question bank.
"""
