"""Tokenize an expression and print each token with its position."""

from arithlex import tokenize

for token in tokenize("12 + 34 - 5 * (67 / 8) ^ 2 % 3"):
    print(f"{token.location}\t{token}")
