"""Model formula parsing for deriving variable roles.

Formulas take the form ``outcome ~ predictor + predictor``. The left-hand
side may be empty. On the right-hand side ``.`` stands for every column not
used on the left, ``- name`` drops a column, and the intercept terms ``0``
and ``1`` are ignored. Names containing operators can be quoted with
backticks.
"""

from __future__ import annotations

import re

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import MalformedSpecificationError

_TOKEN_PATTERN = re.compile(r"`[^`]*`|[+-]|[^+\-`]+")
_NAME_PATTERN = re.compile(r"^[A-Za-z_.][A-Za-z0-9_.]*$")
_INTERCEPT_TERMS = frozenset({"0", "1"})


def split(formula: str, data: ArrowBatch) -> tuple[list[str], list[str]]:
    """Split a formula into predictor and outcome names.

    Args:
        formula: Formula string, e.g. ``"y ~ a + b"``
        data: Batch used to expand ``.`` on the right-hand side

    Returns:
        Tuple of (predictors, outcomes), each in formula order

    Raises:
        MalformedSpecificationError: If the formula cannot be split into
            a left-hand and a right-hand group
    """
    if not isinstance(formula, str):
        raise MalformedSpecificationError(
            "Formula must be a string",
            context={"formula_type": type(formula).__name__},
        )

    sides = formula.split("~")
    if len(sides) != 2:
        raise MalformedSpecificationError(
            "Formula must contain exactly one '~'",
            context={"formula": formula},
        )
    lhs, rhs = sides
    if not rhs.strip():
        raise MalformedSpecificationError(
            "Formula has an empty right-hand side",
            context={"formula": formula},
        )

    outcomes: list[str] = []
    for sign, term in _parse_terms(lhs, formula):
        if sign == "-" or term == ".":
            raise MalformedSpecificationError(
                f"Unsupported left-hand side term: {sign}{term}",
                context={"formula": formula},
            )
        outcomes.append(term)

    predictors: list[str] = []
    removed: set[str] = set()
    for sign, term in _parse_terms(rhs, formula):
        if sign == "-":
            removed.add(term)
        elif term == ".":
            predictors.extend(col for col in data.columns if col not in outcomes)
        else:
            predictors.append(term)

    # Repeated terms count once, at their first position
    predictors = [name for name in dict.fromkeys(predictors) if name not in removed]
    return predictors, list(dict.fromkeys(outcomes))


def _parse_terms(side: str, formula: str) -> list[tuple[str, str]]:
    """Parse one side of a formula into (sign, name) pairs."""
    tokens = [tok.strip() for tok in _TOKEN_PATTERN.findall(side)]
    tokens = [tok for tok in tokens if tok]

    terms = []
    sign = None
    expect_term = True
    for token in tokens:
        if token in ("+", "-"):
            if expect_term and sign is not None:
                raise MalformedSpecificationError(
                    f"Consecutive operators near '{token}'",
                    context={"formula": formula},
                )
            sign = token
            expect_term = True
            continue
        if not expect_term:
            raise MalformedSpecificationError(
                f"Missing operator before '{token}'",
                context={"formula": formula},
            )
        terms.append((sign or "+", _parse_name(token, formula)))
        sign = None
        expect_term = False

    if tokens and expect_term:
        raise MalformedSpecificationError(
            "Formula side ends with an operator",
            context={"formula": formula},
        )
    return [(sign, name) for sign, name in terms if name not in _INTERCEPT_TERMS]


def _parse_name(token: str, formula: str) -> str:
    if token.startswith("`"):
        name = token[1:-1]
        if not name:
            raise MalformedSpecificationError(
                "Empty quoted name", context={"formula": formula}
            )
        return name
    if token == "." or token in _INTERCEPT_TERMS or _NAME_PATTERN.match(token):
        return token
    raise MalformedSpecificationError(
        f"Invalid term: {token!r}", context={"formula": formula}
    )
