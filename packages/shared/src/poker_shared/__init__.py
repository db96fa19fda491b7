"""Shared contract types for the poker desktop backend client.

Provides the result base model, the client error taxonomy, and the Pydantic
models for credentials, session users and tables used across components.
"""
