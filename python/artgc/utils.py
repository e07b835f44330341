import os
import time

_TRUTHY = ("1", "true", "yes", "on")


def get_validate_mode():
    """Check whether evaluation should validate the circuit first"""
    check_env = os.environ.get("ARTGC_VALIDATE")
    if check_env:
        return check_env.strip().lower() in _TRUTHY
    else:
        return False


class Timer:
    def __init__(self, name):
        self.start_time = 0
        self.end_time = 0
        self.name = name

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.time()
        elapsed_time = self.end_time - self.start_time
        print(f"{self.name}: {elapsed_time:.2f} seconds")
