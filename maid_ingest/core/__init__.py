"""
Core domain layer: models, ports, validators and validation rules.
"""
