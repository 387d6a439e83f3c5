"""
Question feature: CRUD, search, nested answers and question votes.
"""
