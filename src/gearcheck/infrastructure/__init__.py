"""gearcheck infrastructure layer.

Implements domain ports: Go parsing, filesystem walking, cross-package
type resolution and configuration loading.
"""
