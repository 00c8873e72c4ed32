"""
Web frontend adapters
"""
