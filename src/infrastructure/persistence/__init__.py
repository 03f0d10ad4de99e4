"""Persistence infrastructure.

Storage adapters for domain entities. The vehicle store is in-memory and
lives for the lifetime of the process.
"""
