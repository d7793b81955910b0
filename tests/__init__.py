"""
Test suite for c_hex

Contains:
- tests/unit/          : Unit tests for domain models, ports and adapters
"""
