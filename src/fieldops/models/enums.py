"""Shared enums for models."""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user within its tenant."""

    ADMIN = "admin"
    WORKER = "worker"
    CUSTOMER = "customer"


class SignerType(str, Enum):
    """Who put their name to a job signature."""

    WORKER = "worker"
    CUSTOMER = "customer"
