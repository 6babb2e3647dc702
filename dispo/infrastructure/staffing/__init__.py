"""
Infrastructure adapters for the staffing bounded context.
"""
