"""Test suite for questbot.

This package contains unit and integration tests for response validation,
the bot framework core, channels, the HTTP server and the CLI. Each test owns
its setup and I/O is replaced at boundaries (subprocess, httpx).
"""
