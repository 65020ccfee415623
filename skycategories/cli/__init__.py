"""
Command-line interface for the Sky Categories client.
"""
