from __future__ import annotations

import dataclasses
import os
import random

import numpy as np
import pytest

from tiny_ion.utils.config import config as ion_config

DEFAULT_SEED = int(os.getenv("TINY_ION_SEED", "1234"))


def pytest_configure(config) -> None:  # pylint: disable=unused-argument
    random.seed(DEFAULT_SEED)
    np.random.seed(DEFAULT_SEED)


@pytest.fixture(autouse=True)
def _restore_config():
    saved = dataclasses.replace(ion_config)
    yield
    for f in dataclasses.fields(saved):
        setattr(ion_config, f.name, getattr(saved, f.name))


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(DEFAULT_SEED)
