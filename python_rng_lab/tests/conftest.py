"""Shared fixtures for RNG lab tests."""

import os
import sys
import pytest

# Ensure python_rng_lab is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def source():
    """A deterministic uniform source."""
    from random_source import RandomSource
    return RandomSource(12345)


@pytest.fixture
def bank(source):
    """The standard seven generators with a fixed seed."""
    from generator_bank import GeneratorBank
    return GeneratorBank.create_default(seed=20240101, source=source)


@pytest.fixture
def sample_histogram():
    """A small histogram over [0, 1] with one value on each edge."""
    from histogram import build_histogram
    return build_histogram([0.0, 0.25, 0.5, 0.75, 1.0], 0.0, 1.0, 4)
