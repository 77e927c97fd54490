"""
Shared Kernel

Framework-free value objects shared across the domain apps.
"""
