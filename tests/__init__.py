"""
wifi-stats Test Suite

This package contains all tests for the collector:
- unit/: Tests for parsers, probes and models in isolation
- integration/: Tests for report collection and the CLI
- fixtures/: Shared command output and the scripted executor
"""
