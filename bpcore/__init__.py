"""Blood-pressure reading parsing and summarization.

This package contains the business logic and domain models,
isolated from transport and persistence for easy testing and reasoning.
"""
