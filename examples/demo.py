#!/usr/bin/env python3
"""
clausematch Feature Demonstration

This script walks through the pattern vocabulary of the clausematch library.
"""

import re
from functools import partial

from clausematch import match, cases, MissingCatchAllPattern


def section(title: str):
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f" {title}")
    print('='*60)


def demo_basic_usage():
    """Demonstrate literals, the catch-all and continuations."""
    section("Basic Usage")

    def fact(n):
        return match(n, lambda p: (p.with_
            or p(0) and 1
            or p() and (lambda n: n * fact(n - 1))))

    for n in [0, 1, 5, 10]:
        print(f"  fact({n}) => {fact(n)}")


def demo_records():
    """Demonstrate subset matching on mappings."""
    section("Records")

    messages = [
        {"protocol": "HTTP", "i": 10},
        {"protocol": "AMQP", "i": 11},
        {"protocol": "AMQP", "i": 5},
        {"protocol": "WAT", "i": 3},
    ]

    handle = match(lambda p: (p.with_
        or p({"protocol": "HTTP", "i": 12}) and (lambda o: 1000)
        or p({"protocol": "HTTP"}) and (lambda o: o["i"] + 1)
        or p.and_({"protocol": "AMQP"}, {"i": 5}) and "AMQP #5"
        or p({"protocol": "AMQP"}) and (lambda o: o["i"] + 2)
        or p() and (lambda o: 0)))

    for message in messages:
        print(f"  {message} => {handle(message)}")


def demo_ranges():
    """Demonstrate inclusive ranges."""
    section("Ranges")

    answer = match(lambda p: (p.with_
        or p.range(0, 41) and "< answer"
        or p.range(43, 100) and "> answer"
        or p(42) and "answer"
        or p() and "< 0, or > 100"))

    for n in [12, 42, 99, 101]:
        print(f"  {n} => {answer(n)}")


def demo_regex():
    """Demonstrate regular expressions and filtering."""
    section("Regular Expressions")

    spell = match(lambda p: (p.with_
        or p(re.compile("1")) and "one"
        or p(re.compile("2")) and "two"
        or p(re.compile("zero", re.I)) and "zero"
        or p() and p.value))

    for value in [1, " 2", "zEro", 90]:
        print(f"  {value!r} => {spell(value)!r}")

    emails = ["hey.com", "fg@plop.com", "fg+plop@plop.com", "wat"]
    invalid = list(filter(match(lambda p: (p.with_
        or p(re.compile(r"\S+@\S+\.\S+")) and (lambda o: False)
        or p() and True)), emails))
    print(f"  invalid emails in {emails} => {invalid}")


def demo_head_tail():
    """Demonstrate head/tail decomposition."""
    section("Head/Tail Decomposition")

    def length(items):
        return match(items, lambda p: (p.with_
            or p([]) and (lambda o: 0)
            or p(p.head, p.tail) and (lambda head, tail: 1 + length(tail))))

    for items in [[], [1, 2, 3], ("a", "b")]:
        print(f"  length({items!r}) => {length(items)}")


def demo_arguments():
    """Demonstrate or_ with command-line style arguments."""
    section("Alternatives")

    def unknown(arg):
        return f"command {arg} not found"

    parse = match(lambda p: (p.with_
        or p.or_("-h", "--help") and "help"
        or p.or_("-v", "--version") and "v0.1.0"
        or p() and (lambda arg: partial(unknown, arg))))

    for arg in ["-h", "--version", "--frobnicate"]:
        result = parse(arg)
        if callable(result):
            result = result()
        print(f"  {arg} => {result}")


def demo_cases():
    """Demonstrate the explicit clause list."""
    section("Clause Lists")

    sign = cases(
        (lambda p: p(0), 0),
        (lambda p: p.range(1, float("inf")), 1),
        (lambda p: p(), -1),
    )

    for n in [-7, 0, 3]:
        print(f"  sign({n}) => {sign(n)}")


def demo_missing_catch_all():
    """Demonstrate the no-match error."""
    section("Missing Catch-All")

    greet = match(lambda p: p.with_ or p("hello") and "world")
    try:
        greet("bye")
    except MissingCatchAllPattern as err:
        print(f"  greet('bye') raised: {err}")


def main():
    """Run all demonstrations."""
    print("\n" + "="*60)
    print(" clausematch Feature Demonstration")
    print("="*60)

    demo_basic_usage()
    demo_records()
    demo_ranges()
    demo_regex()
    demo_head_tail()
    demo_arguments()
    demo_cases()
    demo_missing_catch_all()

    print("\n" + "="*60)
    print(" Demo Complete!")
    print("="*60 + "\n")


if __name__ == "__main__":
    main()
