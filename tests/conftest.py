"""Pytest configuration and shared fixtures for the cmdflags test suite."""

import os

import pytest
from hypothesis import Verbosity, settings

from cmdflags import Program

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def rabbit_program() -> Program:
    """Program with one required text flag and one optional boolean flag."""
    return (
        Program()
        .with_description("A bunny observing tool!")
        .with_required_flag("rabbit-name", "Name of the rabbit to observe")
        .with_optional_flag("closing-pats", True, "Pat the rabbit when finished?")
    )
