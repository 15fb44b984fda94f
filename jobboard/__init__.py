"""Core package for the job board backend.

Holds the document store adapter, query builder, validation layer and
seed loader used by the HTTP service in ``board_service``.
"""
