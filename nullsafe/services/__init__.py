"""Services Layer — the imperative shell around the pure core (printing, demo run).
"""
