"""Core interfaces and abstractions.

Contracts (Protocol) implemented by concrete adapters, so the Core depends
on abstractions only.
"""
