"""
Terminal UI for browsing the example pairs.
"""
