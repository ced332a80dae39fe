"""Small standalone helpers exposed next to the user API."""


def say_hello(first_name: str, last_name: str) -> str:
    return f"Hello, {first_name} {last_name}!"


def is_divisible_by_three(number: int) -> bool:
    return number % 3 == 0
