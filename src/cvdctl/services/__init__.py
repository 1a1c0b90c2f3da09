"""Service layer — business logic returning ServiceResult.

Services parse color specs, resolve options from settings, call the
domain engine, and shape payloads. They never print.
"""
