"""Lokalise Proxy — server-side bridge between the Builder.io plugin and Lokalise.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
