"""
Models Package

Pydantic DTOs for the storefront backend's JSON payloads (camelCase on the
wire, snake_case in Python) and the value types of the charges calculator.
"""
