"""
Documentation translation with line-addressed translation modes
"""
