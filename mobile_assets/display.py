from __future__ import annotations


def success(text: str) -> None:
    print(f"  ✓  {text}")


def error(text: str) -> None:
    print(f"  ✗  {text}")


def header(text: str) -> None:
    print()
    print(f" {text}")
    print(f" {'-' * len(text)}")
    print()
