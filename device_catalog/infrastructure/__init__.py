"""
Infrastructure layer: storage implementations behind the domain repositories.
"""
