"""
Use cases - one class per catalog operation, grouped by entity kind.
"""
