import string

import pytest

from apps.keepalive.utils.random_strings import generate_random_string


def test_default_length_is_twelve():
    assert len(generate_random_string()) == 12


@pytest.mark.parametrize("length", [0, 1, 5, 12, 64])
def test_exact_length_lowercase_only(length):
    value = generate_random_string(length)
    assert len(value) == length
    assert set(value) <= set(string.ascii_lowercase)


def test_values_vary():
    assert len({generate_random_string() for _ in range(20)}) > 1
