"""Kernel – errors, messaging ports, security context and clocks."""
