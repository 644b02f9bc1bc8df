import random
import string

DEFAULT_RANDOM_STRING_LENGTH = 12


def generate_random_string(length: int = DEFAULT_RANDOM_STRING_LENGTH) -> str:
    """Random lowercase a-z string of exactly `length` characters."""
    return "".join(random.choice(string.ascii_lowercase) for _ in range(length))
